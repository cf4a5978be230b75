"""
Tests for command execution and exit status mapping.
Children are small Python scripts run with the current interpreter.
"""

import sys

import pytest

from phargs.commands import Command, CommandSet
from phargs.exec import CommandRunner, ExecutionResult


def python_command(code, *args):
    return Command(sys.executable, ("-c", code) + tuple(args))


class TestCommandRunner:
    """Running one concrete command."""

    def test_successful_command(self):
        result = CommandRunner().run(python_command("pass"))

        assert isinstance(result, ExecutionResult)
        assert result.exit_code == 0
        assert result.success
        assert result.error is None
        assert result.duration_ms >= 0

    def test_nonzero_exit_code_is_propagated(self):
        result = CommandRunner().run(python_command("import sys; sys.exit(7)"))

        assert result.exit_code == 7
        assert not result.success
        assert result.error is None

    def test_arguments_are_passed_verbatim(self, tmp_path):
        out = tmp_path / "out.txt"
        code = "import sys; open(sys.argv[1], 'w').write('|'.join(sys.argv[2:]))"
        command = Command(sys.executable, ("-c", code, str(out), "{}", "$HOME && ls"), "a b")

        result = CommandRunner().run(command)

        assert result.success
        assert out.read_text() == "a b|$HOME && ls"

    def test_working_directory(self, tmp_path):
        code = "open('marker.txt', 'w').write('here')"
        result = CommandRunner(cwd=tmp_path).run(python_command(code))

        assert result.success
        assert (tmp_path / "marker.txt").read_text() == "here"

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals only")
    def test_killed_by_signal_maps_to_generic_failure(self):
        code = "import os, signal; os.kill(os.getpid(), signal.SIGKILL)"
        result = CommandRunner().run(python_command(code))

        assert result.exit_code == 1
        assert not result.success
        assert result.error["type"] == "signal"
        assert "SIGKILL" in result.error["message"]

    def test_missing_program(self):
        command = Command("phargs-no-such-program-xyz", ("{}",), "a")
        result = CommandRunner().run(command)

        assert result.exit_code == 127
        assert result.error["type"] == "execution_error"
        assert result.to_dict()["command"] == "phargs-no-such-program-xyz a"

    def test_runs_generated_commands_in_order(self, tmp_path):
        log = tmp_path / "log.txt"
        code = "import sys; open(sys.argv[1], 'a').write(sys.argv[2] + '\\n')"
        commands = CommandSet(sys.executable, ["-c", code, str(log), "{}"], ["one", "two", "three"])

        runner = CommandRunner()
        results = [runner.run(command) for command in commands]

        assert all(result.success for result in results)
        assert log.read_text().splitlines() == ["one", "two", "three"]
