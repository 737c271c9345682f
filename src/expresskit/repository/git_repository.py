"""Initialize a git repository at the project root."""

import click
from git import Repo
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from expresskit.errors import FileSystemError


def is_inside_work_tree(path: str) -> bool:
    try:
        Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        return False
    return True


def ensure_git_repository(project_root: str) -> bool:
    """Run ``git init`` in *project_root* unless it is already under git.

    Returns True if a repository was created.
    """
    if is_inside_work_tree(project_root):
        return False
    try:
        Repo.init(project_root)
    except GitCommandError as e:
        raise FileSystemError(project_root, e) from e
    click.echo(f"🌱 Initialized git repository in {project_root}")
    return True
