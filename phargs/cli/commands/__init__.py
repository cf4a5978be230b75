"""CLI command handlers."""

from .run import run_commands

__all__ = ['run_commands']
