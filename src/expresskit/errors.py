"""Exceptions raised while materializing a project."""


class ScaffoldError(Exception):
    """Base class for every failure the CLI reports."""


class FileSystemError(ScaffoldError):
    """A directory or file could not be created or written."""

    def __init__(self, path, cause):
        super().__init__(f"{path}: {cause}")
        self.path = path
        self.cause = cause


class ManifestParseError(ScaffoldError):
    """package.json could not be read or is not a JSON object."""


class ProcessExecutionError(ScaffoldError):
    """An external command failed to spawn, exited non-zero, or timed out."""

    def __init__(self, message, cmd, result=None):
        super().__init__(message)
        self.cmd = cmd
        self.result = result


class ProcessInterruptedError(ProcessExecutionError):
    """An external command was cancelled with Ctrl+C."""


class InstallationError(ProcessExecutionError):
    """The package manager could not install the dependencies."""


class SetupError(ScaffoldError):
    """One or more setup steps failed; other steps still ran."""

    def __init__(self, errors):
        self.errors = list(errors)
        lines = [f"{len(self.errors)} setup step(s) failed:"]
        lines += [f"  - {error}" for error in self.errors]
        super().__init__("\n".join(lines))
