"""Click entry point for the expresskit CLI."""

import sys

import click

from expresskit.errors import ScaffoldError
from expresskit.install.command_runner import CommandRunner
from expresskit.install.installer import DEFAULT_TIMEOUT
from expresskit.install.package_manager import PackageManager
from expresskit.scaffold.project_materializer import ProjectMaterializer
from expresskit.scaffold.project_paths import DEFAULT_TARGET
from expresskit.scaffold.scaffold_opts import ScaffoldOpts


@click.command()
@click.version_option(package_name="expresskit")
@click.argument("target", default=DEFAULT_TARGET, required=False)
@click.option(
    "--package-manager",
    type=click.Choice([pm.value for pm in PackageManager]),
    default=None,
    help="Package manager to install with (default: pnpm if available, else npm).",
)
@click.option(
    "--timeout", type=click.IntRange(min=1), default=DEFAULT_TIMEOUT, show_default=True,
    help="Seconds to wait for the dependency install.",
)
@click.option("--skip-install", is_flag=True, help="Generate files without installing dependencies.")
@click.option("--git-init", is_flag=True, help="Initialize a git repository in the project root.")
@click.option("--port", type=int, default=4000, show_default=True, envvar="EXPRESSKIT_PORT",
              help="PORT written to .env.")
@click.option("--mongo-uri", default="mongodb://localhost:27017/", show_default=True,
              envvar="EXPRESSKIT_MONGO_URI", help="MONGO_URI written to .env.")
@click.option("--jwt-secret", default="your_jwt_secret", envvar="EXPRESSKIT_JWT_SECRET",
              help="JWT_SECRET written to .env.")
def main(target, **kwargs):
    """Scaffold an Express + MongoDB authentication backend in TARGET.

    TARGET defaults to "backend"; pass "." to use the current directory.
    """
    opts = ScaffoldOpts(target=target, **kwargs)
    materializer = ProjectMaterializer(CommandRunner())
    try:
        materializer.materialize(opts)
    except ScaffoldError as e:
        click.echo(f"❌ Setup failed: {e}", err=True)
        sys.exit(1)
