"""Helpers for turning command-line input into core inputs."""

import os
import sys
from typing import List, Optional


def comma_separated(text: str) -> List[str]:
    """
    Split a value list on commas.

    Empty pieces are kept, so ``""`` gives ``[""]`` and ``"a,,b"`` gives
    ``["a", "", "b"]``.
    """
    return text.split(',')


def program_from_arg0(program: str, arg0: str) -> str:
    """
    Place ``program`` in the directory of ``arg0``.

    Args:
        program: Program name to relocate
        arg0: Path of the running executable, usually ``sys.argv[0]``

    Returns:
        ``<dir of arg0>/<program>``, or ``program`` if arg0 has no directory part

    Example:
        >>> program_from_arg0('rustc', '/usr/bin/rust')
        '/usr/bin/rustc'
    """
    directory, sep, _ = arg0.rpartition('/')
    if not sep:
        return program
    return f"{directory}/{program}"


def find_sibling_program(program: str, arg0: Optional[str] = None) -> str:
    """Return the sibling of the running executable if it exists, else ``program``."""
    if arg0 is None:
        arg0 = sys.argv[0]
    candidate = program_from_arg0(program, arg0)
    if os.path.exists(candidate):
        return candidate
    return program
