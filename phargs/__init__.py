"""Run one command per value, substituting ``{}`` placeholders."""

from .commands import Command, CommandSet
from .expansion import expand_array, expand_row, row_has_placeholder

__all__ = [
    "Command",
    "CommandSet",
    "expand_array",
    "expand_row",
    "row_has_placeholder",
]

__version__ = "0.1.0"
