"""Command-line interface for newgo."""

from __future__ import annotations

import logging as logging

from newgo import ConfigError as ConfigError
from newgo import DefaultsStore as DefaultsStore
from newgo import MaterializeError as MaterializeError
from newgo import MetadataCollector as MetadataCollector
from newgo import NewGoSettings as NewGoSettings
from newgo import ProjectMaterializer as ProjectMaterializer
from newgo import Prompter as Prompter
from newgo import Toolchain as Toolchain
from newgo import ToolchainError as ToolchainError
from newgo import ToolNotFoundError as ToolNotFoundError
from newgo.cli.app import main as main
from newgo.cli.commands import new as new_command
from newgo.cli.parser import build_parser as build_parser

print_banner = new_command.print_banner
_run_new = new_command.run_new
