# src/tutel/core/commands.py

"""
Command values produced by the argument parser and consumed by the interpreter.

Each command is a small frozen dataclass carrying exactly its own payload.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_models import TaskSelector


@dataclass(frozen=True, slots=True)
class Show:
    pass


@dataclass(frozen=True, slots=True)
class NewProject:
    name: str | None = None
    force: bool = False


@dataclass(frozen=True, slots=True)
class AddTask:
    desc: str
    completed: bool = False


@dataclass(frozen=True, slots=True)
class MarkCompletion:
    value: bool
    selector: TaskSelector


@dataclass(frozen=True, slots=True)
class RemoveTask:
    selector: TaskSelector


@dataclass(frozen=True, slots=True)
class EditTask:
    editor: str
    index: int


@dataclass(frozen=True, slots=True)
class PrintCompletion:
    shell: str


@dataclass(frozen=True, slots=True)
class RemoveProject:
    pass


@dataclass(frozen=True, slots=True)
class CompleteIndices:
    """Shell-completion helper: `words` are the index words typed so far."""

    words: tuple[str, ...] = ()


Command = (
    Show
    | NewProject
    | AddTask
    | MarkCompletion
    | RemoveTask
    | EditTask
    | PrintCompletion
    | RemoveProject
    | CompleteIndices
)
