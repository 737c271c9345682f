"""Detect which package manager to install dependencies with."""

from enum import Enum

from expresskit.errors import ProcessExecutionError, ProcessInterruptedError

DETECTION_TIMEOUT = 30


class PackageManager(Enum):
    PNPM = "pnpm"
    NPM = "npm"

    @property
    def executable(self) -> str:
        return self.value

    @property
    def init_command(self):
        if self is PackageManager.PNPM:
            return ["pnpm", "init"]
        return ["npm", "init", "-y"]

    def add_command(self, packages):
        verb = "add" if self is PackageManager.PNPM else "install"
        return [self.executable, verb, *packages]


def detect_package_manager(runner, cwd=None) -> PackageManager:
    """Prefer pnpm when ``pnpm --version`` succeeds, otherwise use npm.

    A Ctrl+C while pnpm runs propagates as ProcessInterruptedError.
    """
    try:
        result = runner.run(["pnpm", "--version"], cwd=cwd, timeout=DETECTION_TIMEOUT)
    except ProcessInterruptedError:
        raise
    except ProcessExecutionError:
        return PackageManager.NPM
    if result.returncode != 0:
        return PackageManager.NPM
    return PackageManager.PNPM
