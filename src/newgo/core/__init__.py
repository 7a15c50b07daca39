"""Core newgo functionality."""
