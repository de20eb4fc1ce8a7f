# tests/test_console.py

from __future__ import annotations

from pathlib import Path

from tutel.connectors.console import render_project
from tutel.tasks.task_models import Project, Task


def test_render_plain() -> None:
    project = Project(
        name="groceries",
        root=Path("."),
        tasks=[Task(0, "milk", False), Task(12, "eggs", True)],
        next_index=13,
    )
    assert render_project(project, color=False).splitlines() == [
        "groceries",
        "   0 [ ] milk",
        "  12 [x] eggs",
        "  1/2 done",
    ]


def test_render_empty_project() -> None:
    project = Project(name="empty", root=Path("."))
    assert render_project(project).splitlines() == ["empty", "  no tasks"]


def test_render_color_uses_ansi_only_when_enabled() -> None:
    project = Project(name="p", root=Path("."), tasks=[Task(0, "a", True)], next_index=1)
    assert "\033[" in render_project(project, color=True)
    assert "\033[" not in render_project(project, color=False)
