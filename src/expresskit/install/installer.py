"""Install the generated project's runtime dependencies."""

import os

import click

from expresskit.errors import InstallationError, ProcessExecutionError
from expresskit.install.command_runner import format_command
from expresskit.scaffold.manifest import MANIFEST_FILE

DEPENDENCIES = (
    "express",
    "dotenv",
    "jsonwebtoken",
    "cors",
    "mongoose",
    "bcryptjs",
    "cookie-parser",
)

DEFAULT_TIMEOUT = 600


def install_commands(project_root, package_manager):
    """Return the commands needed to install DEPENDENCIES into *project_root*.

    The package manager's own init step only runs when package.json is
    missing.
    """
    commands = []
    if not os.path.isfile(os.path.join(project_root, MANIFEST_FILE)):
        commands.append(package_manager.init_command)
    commands.append(package_manager.add_command(DEPENDENCIES))
    return commands


def install_dependencies(project_root, runner, package_manager, timeout=DEFAULT_TIMEOUT):
    """Install the dependency list, raising InstallationError on any failure."""
    click.echo(f"📦 Installing dependencies using {package_manager.executable}...")

    for cmd in install_commands(project_root, package_manager):
        try:
            result = runner.run(cmd, cwd=project_root, timeout=timeout)
        except ProcessExecutionError as e:
            raise InstallationError(str(e), cmd) from e
        if result.returncode != 0:
            raise InstallationError(_failure_message(cmd, result), cmd, result)

    click.echo("✅ Dependencies installed successfully!")


def _failure_message(cmd, result):
    message = f"`{format_command(cmd)}` exited with status {result.returncode}"
    details = (result.stderr or result.stdout or "").strip()
    if details:
        message += f"\n{details}"
    return message
