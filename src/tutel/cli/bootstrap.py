# src/tutel/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it wires the concrete store, editor
launcher and completion printer into a CommandInterpreter.
"""

from __future__ import annotations

from ..config import Settings, get_settings
from ..connectors.completions import CompletionScripts
from ..connectors.editor import SubprocessEditor
from ..core.interpreter import CommandInterpreter
from ..core.ports import CompletionPrinter, EditorFactory
from ..tasks.task_store import ProjectStore


def create_interpreter(
    *,
    settings: Settings | None = None,
    editor_factory: EditorFactory | None = None,
    completion_printer: CompletionPrinter | None = None,
) -> CommandInterpreter:
    """
    Build the interpreter from settings.

    Collaborators stay injectable so tests can swap the editor for a fake.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    return CommandInterpreter(
        ProjectStore(settings.project_file_name),
        editor_factory=editor_factory or SubprocessEditor,
        completion_printer=completion_printer or CompletionScripts(),
    )
