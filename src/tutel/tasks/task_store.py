# src/tutel/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any

from ..config import DEFAULT_PROJECT_FILE
from ..errors import MalformedProjectFile, ProjectAlreadyExists, ProjectIOError
from .task_models import Project, Task

logger = logging.getLogger(__name__)


class ProjectStore:
    """
    JSON project file store.

    File layout (one file per project root):
        {"name": "...", "next_index": 2,
         "tasks": [{"index": 0, "description": "...", "completed": false}]}

    Writes are all-or-nothing: the data goes to a temp file in the same
    directory, which is then os.replace()d over the project file.
    """

    def __init__(self, file_name: str = DEFAULT_PROJECT_FILE) -> None:
        self.file_name = file_name

    def path_for(self, directory: Path) -> Path:
        return Path(directory) / self.file_name

    def exists(self, directory: Path) -> bool:
        return self.path_for(directory).is_file()

    # ---- public API ----

    def load(self, path: str | Path) -> Project:
        path = Path(path)
        try:
            raw = path.read_text("utf-8")
        except OSError as e:
            raise ProjectIOError(path, "read", e) from e
        except UnicodeDecodeError as e:
            raise MalformedProjectFile(path, "not valid UTF-8") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise MalformedProjectFile(path, f"invalid JSON ({e.msg}, line {e.lineno})") from e

        project = self._from_dict(data, path)
        logger.debug("Loaded project path=%s tasks=%d", path, len(project.tasks))
        return project

    def save(self, project: Project) -> None:
        path = self.path_for(project.root)
        self._atomic_write(path, self._to_dict(project))
        logger.debug(
            "Saved project path=%s tasks=%d next_index=%d",
            path,
            len(project.tasks),
            project.next_index,
        )

    def create(self, directory: str | Path, *, name: str | None = None, force: bool = False) -> Project:
        directory = Path(directory)
        path = self.path_for(directory)
        if path.exists() and not force:
            raise ProjectAlreadyExists(path)

        project = Project(name=name or directory.resolve().name or str(directory), root=directory)
        self.save(project)
        logger.debug("Created project path=%s force=%s", path, force)
        return project

    def delete(self, project: Project) -> None:
        path = self.path_for(project.root)
        try:
            path.unlink()
        except OSError as e:
            raise ProjectIOError(path, "delete", e) from e
        logger.debug("Deleted project path=%s", path)

    # ---- (de)serialization ----

    @staticmethod
    def _to_dict(project: Project) -> dict[str, Any]:
        return {
            "name": project.name,
            "next_index": project.next_index,
            "tasks": [
                {"index": t.index, "description": t.description, "completed": t.completed}
                for t in project.tasks
            ],
        }

    def _from_dict(self, data: Any, path: Path) -> Project:
        if not isinstance(data, dict):
            raise MalformedProjectFile(path, "top level must be an object")

        name = data.get("name", path.parent.name)
        if not isinstance(name, str):
            raise MalformedProjectFile(path, "'name' must be a string")

        raw_tasks = data.get("tasks", [])
        if not isinstance(raw_tasks, list):
            raise MalformedProjectFile(path, "'tasks' must be a list")

        tasks: list[Task] = []
        seen: set[int] = set()
        for pos, entry in enumerate(raw_tasks):
            task = self._task_from_dict(entry, pos, path)
            if task.index in seen:
                raise MalformedProjectFile(path, f"duplicate task index {task.index}")
            seen.add(task.index)
            tasks.append(task)

        next_index = data.get("next_index", 0)
        if not _is_index(next_index):
            raise MalformedProjectFile(path, "'next_index' must be a non-negative integer")
        next_index = max(next_index, max(seen, default=-1) + 1)

        return Project(name=name, root=path.parent, tasks=tasks, next_index=next_index)

    @staticmethod
    def _task_from_dict(entry: Any, pos: int, path: Path) -> Task:
        if not isinstance(entry, dict):
            raise MalformedProjectFile(path, f"task #{pos} must be an object")

        index = entry.get("index")
        if not _is_index(index):
            raise MalformedProjectFile(path, f"task #{pos}: 'index' must be a non-negative integer")

        desc = entry.get("description")
        if not isinstance(desc, str):
            raise MalformedProjectFile(path, f"task #{pos}: 'description' must be a string")

        completed = entry.get("completed", False)
        if not isinstance(completed, bool):
            raise MalformedProjectFile(path, f"task #{pos}: 'completed' must be a boolean")

        return Task(index=index, description=desc, completed=completed)

    @staticmethod
    def _atomic_write(path: Path, data: dict[str, Any]) -> None:
        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(dir=str(path.parent), prefix=path.name + ".", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                os.fchmod(f.fileno(), _file_mode(path))
                json.dump(data, f, ensure_ascii=False, indent=2)
                f.write("\n")
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
            raise ProjectIOError(path, "write", e) from e


def _file_mode(path: Path) -> int:
    # mkstemp creates 0600; keep the existing mode, or what the umask allows for a new file.
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def _is_index(value: Any) -> bool:
    # bool is an int subclass; reject it explicitly.
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0
