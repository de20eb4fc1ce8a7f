# src/tutel/tasks/selector.py

from __future__ import annotations

from collections.abc import Sequence

from ..errors import IndexNotFound
from .task_models import All, Completed, Indexed, Project, Task, TaskSelector


def resolve(selector: TaskSelector, project: Project) -> list[Task]:
    """
    Turn a selector into the concrete tasks it names.

    - Indexed: tasks in request order, duplicates collapsed; the first
      unknown index fails the whole resolution with IndexNotFound
    - All: every task, insertion order
    - Completed: completed tasks, insertion order (may be empty)
    """
    if isinstance(selector, Indexed):
        by_index = {t.index: t for t in project.tasks}
        out: list[Task] = []
        seen: set[int] = set()
        for index in selector.indices:
            if index in seen:
                continue
            task = by_index.get(index)
            if task is None:
                raise IndexNotFound(index)
            seen.add(index)
            out.append(task)
        return out

    if isinstance(selector, All):
        return list(project.tasks)

    if isinstance(selector, Completed):
        return [t for t in project.tasks if t.completed]

    raise TypeError(f"unknown task selector: {selector!r}")


def complete_indices(project: Project, words: Sequence[str]) -> list[tuple[int, str]]:
    """
    Candidate indices for the word being typed (shell completion).

    The last word is the (possibly empty) prefix being completed; earlier
    words are indices the user already gave, so they are not offered again.
    """
    given = set(words[:-1])
    active = words[-1] if words else ""

    out: list[tuple[int, str]] = []
    for task in project.tasks:
        tid = str(task.index)
        if tid in given:
            continue
        if tid.startswith(active):
            out.append((task.index, task.description))
    return out
