"""Write the generated application sources into the tree."""

import os
from types import MappingProxyType

import click

from expresskit.errors import FileSystemError, SetupError
from expresskit.templates.template_renderer import render_template

# Relative to the source root.
SOURCE_TEMPLATES = MappingProxyType({
    "app.js": "app.js.j2",
    "server.js": "server.js.j2",
    "config/db.js": "db.js.j2",
    "controllers/authController.js": "authController.js.j2",
    "routes/authRoutes.js": "authRoutes.js.j2",
})


def render_file(template_name, variables):
    """Render *template_name* into the exact text written to disk."""
    text = render_template(template_name, package=__package__, **variables)
    return text.strip() + "\n"


def write_all(root, template_map, variables):
    """Render and write every entry of *template_map* under *root*.

    Existing files are replaced. A failed write does not stop the others;
    all failures are raised together once every entry has been tried.
    """
    errors = []
    for relative_path, template_name in template_map.items():
        path = os.path.join(root, relative_path)
        try:
            _write_file(path, render_file(template_name, variables))
        except FileSystemError as e:
            click.echo(f"❌ Error creating {relative_path}: {e.cause}", err=True)
            errors.append(e)
    if errors:
        raise SetupError(errors)


def _write_file(path, content):
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise FileSystemError(path, e) from e
    click.echo(f"📄 {path}")
