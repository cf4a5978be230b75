"""
Command runner module.
Spawns one generated command at a time and maps its exit status.
"""

import errno
import logging
import signal
import subprocess
import time
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass

from ..commands import Command


logger = logging.getLogger(__name__)

# Generic failure when a child produced no usable exit code
EXIT_FAILURE = 1
EXIT_NOT_EXECUTABLE = 126
EXIT_NOT_FOUND = 127


@dataclass
class ExecutionResult:
    """Result of running one command."""
    command_string: str
    exit_code: int
    duration_ms: int
    error: Optional[Dict[str, Any]] = None

    @property
    def success(self) -> bool:
        return self.exit_code == 0 and self.error is None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dict for reporting."""
        result: Dict[str, Any] = {
            "command": self.command_string,
            "exit_code": self.exit_code,
            "duration_ms": self.duration_ms,
        }
        if self.error:
            result["error"] = self.error
        return result


def _signal_name(signum: int) -> str:
    try:
        return signal.Signals(signum).name
    except ValueError:
        return f"signal {signum}"


class CommandRunner:
    """
    Runs generated commands in argv mode with inherited stdio.
    """

    def __init__(self, cwd: Optional[Path] = None):
        """
        Initialize command runner.

        Args:
            cwd: Working directory for children (default: current directory)
        """
        self.cwd = cwd

    def run(self, command: Command) -> ExecutionResult:
        """
        Run a command and wait for it to finish.

        Args:
            command: Concrete command to spawn

        Returns:
            ExecutionResult; a child killed by a signal maps to exit code 1
        """
        command_string = command.command_string()
        start_time = time.time()
        error = None

        try:
            # argv mode, no shell=True: arguments are passed through verbatim
            completed = subprocess.run(
                command.argv(),
                cwd=str(self.cwd) if self.cwd else None,
            )
            returncode = completed.returncode

            if returncode < 0:
                name = _signal_name(-returncode)
                exit_code = EXIT_FAILURE
                error = {
                    "type": "signal",
                    "message": f"Command terminated by {name}",
                    "context": {"signal": -returncode}
                }
            else:
                exit_code = returncode

        except OSError as e:
            if e.errno == errno.ENOENT:
                exit_code = EXIT_NOT_FOUND
            elif e.errno == errno.EACCES:
                exit_code = EXIT_NOT_EXECUTABLE
            else:
                exit_code = EXIT_FAILURE
            error = {
                "type": "execution_error",
                "message": str(e),
                "context": {"program": command.program}
            }

        duration_ms = int((time.time() - start_time) * 1000)

        if error:
            logger.debug(f"Command error: {error}")

        return ExecutionResult(
            command_string=command_string,
            exit_code=exit_code,
            duration_ms=duration_ms,
            error=error,
        )
