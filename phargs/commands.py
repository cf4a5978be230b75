"""
Command generation.

A CommandSet expands its argument templates once and then yields one
Command per value, or a single unsubstituted Command when no argument
carries a placeholder.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

from .expansion import PLACEHOLDER, expand_row, row_has_placeholder


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Command:
    """A program plus arguments resolved against a single value."""
    program: str
    args: Tuple[str, ...]
    value: str = ""

    def arguments(self) -> List[str]:
        """Return the arguments with every ``{}`` replaced by ``value``."""
        return [arg.replace(PLACEHOLDER, self.value) for arg in self.args]

    def argv(self) -> List[str]:
        """Return the full argv array, program first."""
        return [self.program, *self.arguments()]

    def command_string(self) -> str:
        """
        Return the command as one line for logging and dry runs.

        Arguments are joined with single spaces and never quoted, so the
        result is not safe to paste into a shell.
        """
        return f"{self.program} {' '.join(self.arguments())}"


class CommandSet:
    """
    Commands generated from one program, its argument templates and a value list.

    Array templates are expanded in the constructor; the resulting row is
    shared read-only by every Command the set yields.
    """

    def __init__(self, program: str, args: Iterable[str], values: Iterable[str]):
        """
        Initialize the command set.

        Args:
            program: Program name or path to run
            args: Argument templates, possibly containing ``[...]`` and ``{}``
            values: Substitution values; their order is the run order
        """
        self.program = program
        self.values: Tuple[str, ...] = tuple(values)
        self.args: Tuple[str, ...] = tuple(expand_row(args, self.values))
        self.has_placeholder = row_has_placeholder(self.args)

        logger.debug(f"Expanded arguments: {list(self.args)}")

    def __iter__(self) -> Iterator[Command]:
        return self.iter_commands()

    def __len__(self) -> int:
        if not self.has_placeholder:
            return 1
        return len(self.values)

    def iter_commands(self) -> Iterator[Command]:
        """
        Yield the concrete commands in value order.

        Without a placeholder exactly one command is yielded, even for an
        empty value list. With one, each value yields a command and an
        empty value list yields nothing.
        """
        if not self.has_placeholder:
            yield Command(self.program, self.args)
            return

        for value in self.values:
            yield Command(self.program, self.args, value)
