"""Configuration helpers."""

from newgo.core.config.settings import NewGoSettings

__all__ = ["NewGoSettings"]
