"""Run command implementation: generate commands and execute or print them."""

import logging
from argparse import Namespace
from pathlib import Path
from typing import List, Optional, Tuple

from phargs.commands import CommandSet
from phargs.config import ConfigLoader, RunConfig
from phargs.exceptions import ConfigValidationError, EmptyCommandError
from phargs.exec import CommandRunner
from phargs.program import comma_separated, find_sibling_program


logger = logging.getLogger(__name__)


def resolve_config(args: Namespace) -> RunConfig:
    """
    Merge the optional config file with command-line flags.

    Flags given on the command line win; ``-w`` replaces the configured
    value list instead of extending it.
    """
    if args.config:
        config = ConfigLoader().load(Path(args.config))
    else:
        config = RunConfig()

    if args.wlist is not None:
        config.values = comma_separated(args.wlist)
    if args.dry_run is not None:
        config.dry_run = args.dry_run
    if args.sibling is not None:
        config.sibling = args.sibling
    if args.log_level is not None:
        config.log_level = args.log_level

    return config


def setup_logging(args: Namespace, log_level: str) -> None:
    """Configure root logging from --debug/--quiet or the resolved level."""
    level = getattr(logging, log_level.upper())
    if args.debug:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def split_command(command: Optional[List[str]]) -> Tuple[str, List[str]]:
    """Split the trailing positional list into program and argument templates."""
    command = list(command or [])
    if command and command[0] == '--':
        command = command[1:]
    if not command:
        raise EmptyCommandError()
    return command[0], command[1:]


def run_commands(args: Namespace) -> int:
    """
    Run (or print) one command per value.

    Stops at the first failing command and returns its exit code.
    """
    config_error = None
    try:
        config = resolve_config(args)
    except ConfigValidationError as e:
        config_error = e
        config = RunConfig()

    setup_logging(args, config.log_level)

    if config_error:
        for error in config_error.errors:
            logger.error(f"Config error: {error.message}")
        return config_error.exit_code

    try:
        program, templates = split_command(args.command)
    except EmptyCommandError as e:
        logger.error(str(e))
        return e.exit_code

    try:
        if config.sibling:
            resolved = find_sibling_program(program)
            if resolved != program:
                logger.debug(f"Using sibling program: {resolved}")
            program = resolved

        commands = CommandSet(program, templates, config.values)

        if config.dry_run:
            for command in commands:
                print(command.command_string())
            return 0

        runner = CommandRunner()
        for command in commands:
            logger.info(f"running: {command.command_string()}")
            result = runner.run(command)
            if not result.success:
                logger.error(f"failed to run: {result.command_string}")
                if result.error:
                    logger.error(result.error["message"])
                return result.exit_code

        return 0

    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1
