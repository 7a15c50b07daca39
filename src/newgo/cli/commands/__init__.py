"""CLI command handlers."""
