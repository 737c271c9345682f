"""Project materialization: tree, files, manifest, install."""

import shlex
from concurrent.futures import ThreadPoolExecutor

import click

from expresskit.errors import ScaffoldError, SetupError
from expresskit.install.command_runner import format_command
from expresskit.install.installer import DEPENDENCIES, install_dependencies
from expresskit.install.package_manager import PackageManager, detect_package_manager
from expresskit.repository.git_repository import ensure_git_repository
from expresskit.scaffold.env_files import write_env_files
from expresskit.scaffold.manifest import merge_manifest
from expresskit.scaffold.project_paths import resolve_project_paths
from expresskit.scaffold.template_writer import SOURCE_TEMPLATES, write_all
from expresskit.scaffold.tree_builder import ensure_tree


class ProjectMaterializer:
    """Orchestrates project generation using an injected command runner."""

    def __init__(self, runner, detector=detect_package_manager, cwd=None):
        self._runner = runner
        self._detector = detector
        self._cwd = cwd

    def materialize(self, opts):
        """Generate the project described by *opts*.

        Returns the resolved ProjectPaths. Raises ScaffoldError on the first
        unrecovered failure; the success message is only printed when every
        step completed.
        """
        paths = resolve_project_paths(opts.target, cwd=self._cwd)
        click.echo(f"\n🚀 Setting up project in: {paths.project_root}\n")

        ensure_tree(paths.source_root)
        self._run_setup_steps(paths, opts.template_variables)

        if opts.git_init:
            ensure_git_repository(paths.project_root)

        package_manager = self._package_manager(opts, paths.project_root)
        if not opts.skip_install:
            install_dependencies(
                paths.project_root, self._runner, package_manager, timeout=opts.timeout,
            )

        print_instructions(opts.target, paths, package_manager, opts.skip_install)
        return paths

    def _run_setup_steps(self, paths, variables):
        steps = {
            "project files": (write_all, paths.source_root, SOURCE_TEMPLATES, variables),
            "package.json": (merge_manifest, paths.project_root),
            ".env/.gitignore": (write_env_files, paths.project_root, variables),
        }
        with ThreadPoolExecutor(max_workers=len(steps)) as pool:
            futures = {
                label: pool.submit(fn, *args) for label, (fn, *args) in steps.items()
            }

        errors = []
        for label, future in futures.items():
            try:
                future.result()
            except SetupError as e:
                errors.extend(e.errors)
            except ScaffoldError as e:
                click.echo(f"❌ Error creating {label}: {e}", err=True)
                errors.append(e)
        if errors:
            raise SetupError(errors)

    def _package_manager(self, opts, project_root):
        if opts.package_manager:
            return PackageManager(opts.package_manager)
        return self._detector(self._runner, cwd=project_root)


def print_instructions(target, paths, package_manager, skip_install):
    click.echo("\n🎉 Setup Complete! Run the following commands to start:\n")
    if not paths.is_current_directory:
        click.echo(f"  cd {shlex.quote(target)}")
    if skip_install:
        click.echo(f"  {format_command(package_manager.add_command(DEPENDENCIES))}")
    click.echo("  node src/server.js\n")
