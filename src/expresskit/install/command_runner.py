"""CommandRunner: the single seam through which external commands are run.

Provides a module-level run_command() and a CommandRunner class that
delegates to it, so tests can swap in a fake runner instead of calling a
real package manager.
"""

import subprocess
from dataclasses import dataclass
from typing import List, Optional

from expresskit.errors import ProcessExecutionError, ProcessInterruptedError
from expresskit.install.managed_subprocess import ManagedSubprocess


@dataclass
class CommandResult:
    """Exit status and captured output of a finished command."""
    returncode: int
    stdout: str = ""
    stderr: str = ""


def format_command(cmd: List[str]) -> str:
    return " ".join(cmd)


def run_command(cmd: List[str], cwd: Optional[str], timeout: Optional[float] = None) -> CommandResult:
    """Run *cmd* in *cwd*, capturing its output.

    Raises:
        ProcessExecutionError: If the command cannot be started or exceeds
            *timeout* seconds.
        ProcessInterruptedError: If the command is interrupted with Ctrl+C.
    """
    try:
        process = subprocess.Popen(
            cmd,
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            start_new_session=True,
        )
    except OSError as e:
        raise ProcessExecutionError(f"Could not start `{format_command(cmd)}`: {e}", cmd) from e

    with ManagedSubprocess(process, label=cmd[0]) as managed:
        try:
            stdout, stderr = process.communicate(timeout=timeout)
        except subprocess.TimeoutExpired:
            managed.stop()
            process.communicate()
            raise ProcessExecutionError(
                f"`{format_command(cmd)}` timed out after {timeout} seconds", cmd,
            ) from None

    if managed.interrupted:
        raise ProcessInterruptedError(f"`{format_command(cmd)}` was interrupted", cmd)

    return CommandResult(returncode=process.returncode, stdout=stdout, stderr=stderr)


class CommandRunner:
    """Runs external commands as subprocesses."""

    def run(self, cmd: List[str], cwd: Optional[str], timeout: Optional[float] = None) -> CommandResult:
        return run_command(cmd, cwd, timeout=timeout)
