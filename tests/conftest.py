# tests/conftest.py

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from types import SimpleNamespace

import pytest

from tutel.connectors.completions import CompletionScripts
from tutel.core.interpreter import CommandInterpreter
from tutel.tasks.task_models import Project, Task
from tutel.tasks.task_store import ProjectStore

from .fakes import FakeEditor


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with cli.main and bootstrap.

    We intentionally use a SimpleNamespace rather than reading the real
    environment, to keep tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="tutel",
        log_level="WARNING",
        log_file=None,
        project_file_name=".tutel.json",
        editor=None,
        color=False,
    )


@pytest.fixture()
def store() -> ProjectStore:
    return ProjectStore(".tutel.json")


@pytest.fixture()
def project_dir(tmp_path: Path) -> Path:
    d = tmp_path / "groceries"
    d.mkdir()
    return d


@pytest.fixture()
def fake_editor() -> FakeEditor:
    return FakeEditor()


@pytest.fixture()
def interpreter(store: ProjectStore, fake_editor: FakeEditor) -> CommandInterpreter:
    return CommandInterpreter(
        store,
        editor_factory=fake_editor,
        completion_printer=CompletionScripts(),
    )


@pytest.fixture()
def make_project(store: ProjectStore) -> Callable[..., Project]:
    """Write a project with the given (index, description, completed) tasks."""

    def _make(directory: Path, tasks: list[tuple[int, str, bool]] = (), name: str = "test") -> Project:
        project = Project(
            name=name,
            root=directory,
            tasks=[Task(index=i, description=d, completed=c) for i, d, c in tasks],
            next_index=max((i for i, _, _ in tasks), default=-1) + 1,
        )
        store.save(project)
        return project

    return _make
