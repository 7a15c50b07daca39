"""Defaults persistence."""

from newgo.core.defaults.store import (
    DEFAULTS_FILENAME,
    DefaultsStore,
    default_defaults_path,
    parse_defaults,
    serialize_defaults,
)

__all__ = [
    "DEFAULTS_FILENAME",
    "DefaultsStore",
    "default_defaults_path",
    "parse_defaults",
    "serialize_defaults",
]
