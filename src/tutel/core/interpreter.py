# src/tutel/core/interpreter.py

"""
Command interpreter.

One command is one transition on a freshly loaded project:
locate -> validate -> mutate in memory -> save (or delete).
Nothing is written until every precondition of the command has been checked,
so a failing command leaves the project file untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..errors import EditorNotConfigured, EmptyDescription
from ..tasks.locator import find_project_file, locate_project
from ..tasks.selector import complete_indices, resolve
from ..tasks.task_models import Project
from ..tasks.task_store import ProjectStore
from .commands import (
    AddTask,
    Command,
    CompleteIndices,
    EditTask,
    MarkCompletion,
    NewProject,
    PrintCompletion,
    RemoveProject,
    RemoveTask,
    Show,
)
from .ports import Cancelled, CompletionPrinter, EditorFactory

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CommandResult:
    """
    What a command produced.

    - project: the project after the command (read-only view for rendering);
      None when no project was involved or it was deleted
    - output: text to print verbatim (completion scripts / candidates)
    - persisted: True if the project file was written or deleted
    """

    project: Project | None = None
    output: str | None = None
    persisted: bool = False


class CommandInterpreter:
    def __init__(
        self,
        store: ProjectStore,
        *,
        editor_factory: EditorFactory,
        completion_printer: CompletionPrinter,
    ) -> None:
        self.store = store
        self.editor_factory = editor_factory
        self.completion_printer = completion_printer
        self._handlers: dict[type, Callable[..., CommandResult]] = {
            Show: self._show,
            NewProject: self._new_project,
            AddTask: self._add_task,
            MarkCompletion: self._mark_completion,
            RemoveTask: self._remove_task,
            EditTask: self._edit_task,
            PrintCompletion: self._print_completion,
            RemoveProject: self._remove_project,
            CompleteIndices: self._complete_indices,
        }

    def execute(self, command: Command, *, cwd: Path) -> CommandResult:
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"unknown command: {command!r}")
        logger.debug("Executing %s cwd=%s", command, cwd)
        return handler(command, Path(cwd))

    # ---- handlers ----

    def _show(self, cmd: Show, cwd: Path) -> CommandResult:
        return CommandResult(project=locate_project(cwd, self.store))

    def _new_project(self, cmd: NewProject, cwd: Path) -> CommandResult:
        project = self.store.create(cwd, name=cmd.name, force=cmd.force)
        return CommandResult(project=project, persisted=True)

    def _add_task(self, cmd: AddTask, cwd: Path) -> CommandResult:
        if not cmd.desc.strip():
            raise EmptyDescription()
        project = locate_project(cwd, self.store)
        task = project.add(cmd.desc, completed=cmd.completed)
        self.store.save(project)
        logger.debug("Task added index=%d completed=%s", task.index, task.completed)
        return CommandResult(project=project, persisted=True)

    def _mark_completion(self, cmd: MarkCompletion, cwd: Path) -> CommandResult:
        project = locate_project(cwd, self.store)
        for task in resolve(cmd.selector, project):
            task.completed = cmd.value
        self.store.save(project)
        return CommandResult(project=project, persisted=True)

    def _remove_task(self, cmd: RemoveTask, cwd: Path) -> CommandResult:
        project = locate_project(cwd, self.store)
        selected = resolve(cmd.selector, project)
        removed = project.remove({t.index for t in selected})
        self.store.save(project)
        logger.debug("Removed %d task(s)", len(removed))
        return CommandResult(project=project, persisted=True)

    def _edit_task(self, cmd: EditTask, cwd: Path) -> CommandResult:
        project = locate_project(cwd, self.store)
        task = project.get(cmd.index)

        if not cmd.editor.strip():
            raise EditorNotConfigured()

        result = self.editor_factory(cmd.editor).invoke(task.description)
        if isinstance(result, Cancelled):
            logger.debug("Edit of task %d cancelled", task.index)
            return CommandResult(project=project)

        desc = result.text.strip()
        if not desc:
            raise EmptyDescription()
        task.description = desc
        self.store.save(project)
        return CommandResult(project=project, persisted=True)

    def _print_completion(self, cmd: PrintCompletion, cwd: Path) -> CommandResult:
        return CommandResult(output=self.completion_printer.script_for(cmd.shell))

    def _remove_project(self, cmd: RemoveProject, cwd: Path) -> CommandResult:
        project = locate_project(cwd, self.store)
        self.store.delete(project)
        return CommandResult(persisted=True)

    def _complete_indices(self, cmd: CompleteIndices, cwd: Path) -> CommandResult:
        # Outside a project there is simply nothing to complete.
        path = find_project_file(cwd, self.store.file_name)
        if path is None:
            return CommandResult(output="")
        project = self.store.load(path)
        lines = [f"{index}\t{desc}" for index, desc in complete_indices(project, cmd.words)]
        return CommandResult(project=project, output="\n".join(lines))
