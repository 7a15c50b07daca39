"""CLI progress displays."""

from newgo.cli.progress.rich import RichMaterializeProgress

__all__ = ["RichMaterializeProgress"]
