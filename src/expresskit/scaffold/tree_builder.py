"""Create the directory skeleton under the source root."""

import os

import click

from expresskit.errors import FileSystemError

FOLDERS = (
    "controllers",
    "middlewares",
    "models",
    "routes",
    "utils",
    "config",
)


def ensure_tree(source_root, folders=FOLDERS):
    """Create *source_root* and each of *folders* beneath it.

    Existing directories are left alone. Any OS error is fatal because the
    template files need these directories.
    """
    for path in [source_root] + [os.path.join(source_root, f) for f in folders]:
        _ensure_dir(path)


def _ensure_dir(path):
    if os.path.isdir(path):
        return
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise FileSystemError(path, e) from e
    click.echo(f"📁 {path}")
