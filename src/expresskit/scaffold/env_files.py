"""Write .env and .gitignore at the project root unless they already exist."""

import os

import click

from expresskit.errors import FileSystemError
from expresskit.scaffold.template_writer import render_file

ROOT_TEMPLATES = {
    ".gitignore": "gitignore.j2",
    ".env": "env.j2",
}


def write_env_files(project_root, variables):
    """Create each root file exclusively; an existing file is never touched.

    Returns the list of paths that were created.
    """
    created = []
    for name, template_name in ROOT_TEMPLATES.items():
        path = os.path.join(project_root, name)
        if _create_if_absent(path, render_file(template_name, variables)):
            created.append(path)
    return created


def _create_if_absent(path, content):
    try:
        with open(path, "x", encoding="utf-8") as f:
            f.write(content)
    except FileExistsError:
        return False
    except OSError as e:
        raise FileSystemError(path, e) from e
    click.echo(f"📄 {path}")
    return True
