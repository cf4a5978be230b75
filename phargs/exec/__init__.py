"""
Execution module for phargs.
Handles process execution and exit status mapping.
"""

from .runner import CommandRunner, ExecutionResult

__all__ = [
    "CommandRunner",
    "ExecutionResult",
]
