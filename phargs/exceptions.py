"""phargs exceptions."""

from typing import List
from dataclasses import dataclass


@dataclass
class ValidationError:
    """Single validation error."""
    message: str
    path: str = ""
    exit_code: int = 2


class ConfigValidationError(Exception):
    """Raised when a configuration file fails validation.

    The loader collects every problem before raising so the CLI can
    report them together and map them to a single exit code.
    """

    def __init__(self, errors: List[ValidationError]):
        self.errors = errors
        self.exit_code = 2

        messages = []
        for error in errors:
            if error.path:
                messages.append(f"Validation error at {error.path}: {error.message}")
            else:
                messages.append(f"Validation error: {error.message}")

        super().__init__("\n".join(messages))


class EmptyCommandError(ValueError):
    """Raised when no program was given to run."""

    exit_code = 2

    def __init__(self, message: str = "command is empty"):
        super().__init__(message)
