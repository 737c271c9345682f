"""Resolve the project root and source root from the CLI target."""

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_TARGET = "backend"
CURRENT_DIRECTORY = "."
SOURCE_DIR = "src"


@dataclass(frozen=True)
class ProjectPaths:
    """Absolute paths of the project being generated."""

    project_root: str
    source_root: str
    is_current_directory: bool


def resolve_project_paths(target: Optional[str] = None, cwd: Optional[str] = None) -> ProjectPaths:
    """Derive the project and source roots for *target*.

    A missing target falls back to ``backend``; ``.`` means the current
    working directory itself.
    """
    target = target or DEFAULT_TARGET
    cwd = cwd or os.getcwd()

    is_current_directory = target == CURRENT_DIRECTORY
    if is_current_directory:
        project_root = os.path.abspath(cwd)
    else:
        project_root = os.path.abspath(os.path.join(cwd, target))

    return ProjectPaths(
        project_root=project_root,
        source_root=os.path.join(project_root, SOURCE_DIR),
        is_current_directory=is_current_directory,
    )
