# src/tutel/tasks/locator.py

from __future__ import annotations

import logging
from pathlib import Path

from ..errors import ProjectNotFound
from .task_models import Project
from .task_store import ProjectStore

logger = logging.getLogger(__name__)


def find_project_file(start: str | Path, file_name: str) -> Path | None:
    """Return the closest project file at or above `start`, or None."""
    start = Path(start).absolute()
    for directory in (start, *start.parents):
        candidate = directory / file_name
        if candidate.is_file():
            return candidate
    return None


def locate_project(start: str | Path, store: ProjectStore) -> Project:
    """
    Load the project that owns `start`.

    Searches `start` and then each ancestor, closest first. Read-only.
    """
    path = find_project_file(start, store.file_name)
    if path is None:
        raise ProjectNotFound(Path(start))
    logger.debug("Project file found start=%s path=%s", start, path)
    return store.load(path)
