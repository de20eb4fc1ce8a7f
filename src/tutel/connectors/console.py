# src/tutel/connectors/console.py

"""
Terminal renderer.

Consumes a read-only project view and returns the text to print. ANSI styling
is applied only when the caller says color is enabled (see Settings.color).
"""

from __future__ import annotations

from ..tasks.task_models import Project

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
GREEN = "\033[32m"


def _style(text: str, *codes: str, color: bool) -> str:
    if not color or not codes:
        return text
    return "".join(codes) + text + RESET


def render_project(project: Project, *, color: bool = False) -> str:
    lines = [_style(project.name, BOLD, color=color)]

    if not project.tasks:
        lines.append(_style("  no tasks", DIM, color=color))
        return "\n".join(lines)

    width = max(len(str(t.index)) for t in project.tasks)
    done = sum(1 for t in project.tasks if t.completed)

    for task in project.tasks:
        idx = str(task.index).rjust(width)
        if task.completed:
            mark = _style("[x]", GREEN, color=color)
            desc = _style(task.description, DIM, color=color)
        else:
            mark = "[ ]"
            desc = task.description
        lines.append(f"  {idx} {mark} {desc}")

    lines.append(_style(f"  {done}/{len(project.tasks)} done", DIM, color=color))
    return "\n".join(lines)
