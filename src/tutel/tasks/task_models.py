# src/tutel/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..errors import EmptyDescription, IndexNotFound


@dataclass(slots=True)
class Task:
    index: int
    description: str
    completed: bool = False


@dataclass(slots=True)
class Project:
    """
    An ordered task list bound to a directory.

    Notes:
    - insertion order is display order; indices may have gaps after removals
    - `next_index` only grows, so a removed index is never handed out again
    - `root` is where the project file lives; it is derived at load time
      and never serialized
    """

    name: str
    root: Path
    tasks: list[Task] = field(default_factory=list)
    next_index: int = 0

    def get(self, index: int) -> Task:
        for task in self.tasks:
            if task.index == index:
                return task
        raise IndexNotFound(index)

    def has(self, index: int) -> bool:
        return any(task.index == index for task in self.tasks)

    def add(self, description: str, *, completed: bool = False) -> Task:
        desc = description.strip()
        if not desc:
            raise EmptyDescription()

        index = max(self.next_index, self._max_index() + 1)
        task = Task(index=index, description=desc, completed=completed)
        self.tasks.append(task)
        self.next_index = index + 1
        return task

    def remove(self, indices: set[int]) -> list[Task]:
        """Drop the given tasks; everything else keeps its index and position."""
        removed = [t for t in self.tasks if t.index in indices]
        self.tasks = [t for t in self.tasks if t.index not in indices]
        return removed

    def _max_index(self) -> int:
        return max((t.index for t in self.tasks), default=-1)


@dataclass(frozen=True, slots=True)
class Indexed:
    """Explicit task indices, in request order (duplicates allowed)."""

    indices: tuple[int, ...]


@dataclass(frozen=True, slots=True)
class All:
    pass


@dataclass(frozen=True, slots=True)
class Completed:
    pass


TaskSelector = Indexed | All | Completed
