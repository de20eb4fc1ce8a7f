# tests/test_selector.py

from __future__ import annotations

from pathlib import Path

import pytest

from tutel.errors import IndexNotFound
from tutel.tasks.selector import complete_indices, resolve
from tutel.tasks.task_models import All, Completed, Indexed, Project, Task


@pytest.fixture()
def project() -> Project:
    return Project(
        name="p",
        root=Path("."),
        tasks=[
            Task(0, "a", False),
            Task(2, "b", True),
            Task(5, "c", False),
            Task(12, "d", True),
        ],
        next_index=13,
    )


def test_all_returns_every_task_in_order(project: Project) -> None:
    assert resolve(All(), project) == project.tasks


def test_completed_returns_only_completed(project: Project) -> None:
    assert [t.index for t in resolve(Completed(), project)] == [2, 12]


def test_completed_may_be_empty(project: Project) -> None:
    for t in project.tasks:
        t.completed = False
    assert resolve(Completed(), project) == []


def test_indexed_keeps_request_order(project: Project) -> None:
    assert [t.index for t in resolve(Indexed((5, 0)), project)] == [5, 0]


def test_indexed_duplicates_are_one_reference(project: Project) -> None:
    once = resolve(Indexed((2,)), project)
    twice = resolve(Indexed((2, 2)), project)
    assert once == twice
    assert len(twice) == 1


def test_indexed_reports_first_missing_index(project: Project) -> None:
    with pytest.raises(IndexNotFound) as exc:
        resolve(Indexed((0, 7, 9)), project)
    assert exc.value.index == 7


def test_complete_indices_filters_by_prefix(project: Project) -> None:
    assert complete_indices(project, ["1"]) == [(12, "d")]
    assert complete_indices(project, [""]) == [(0, "a"), (2, "b"), (5, "c"), (12, "d")]
    assert complete_indices(project, []) == [(0, "a"), (2, "b"), (5, "c"), (12, "d")]


def test_complete_indices_skips_already_given(project: Project) -> None:
    assert complete_indices(project, ["0", "5", ""]) == [(2, "b"), (12, "d")]
