import os
import signal
import subprocess
import sys


class ManagedSubprocess:
    """Context manager that stops a child process group on Ctrl+C or timeout.

    The child process must be started with start_new_session=True so that
    the whole group (package managers spawn their own workers) can be
    signalled at once.
    """

    def __init__(
        self,
        process: subprocess.Popen,
        label: str,
        terminate_timeout: float = 5.0,
    ):
        self.process = process
        self.label = label
        self.terminate_timeout = terminate_timeout
        self.interrupted = False

    def __enter__(self) -> "ManagedSubprocess":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is KeyboardInterrupt:
            print(
                f"\nInterrupted. Terminating {self.label} process...",
                file=sys.stderr,
            )
            self.stop()
            self.interrupted = True
            return True
        return False

    def stop(self) -> None:
        """Terminate the process group, force-killing it if it lingers."""
        self._signal_group(signal.SIGTERM)
        try:
            self.process.wait(timeout=self.terminate_timeout)
        except subprocess.TimeoutExpired:
            print(
                f"Force-killing {self.label} process...",
                file=sys.stderr,
            )
            self._signal_group(signal.SIGKILL)
            self.process.wait()

    def _signal_group(self, signum) -> None:
        try:
            os.killpg(self.process.pid, signum)
        except ProcessLookupError:
            pass
