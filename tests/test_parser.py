# tests/test_parser.py

from __future__ import annotations

import pytest

from tutel.cli.parser import parse_command, selector_from_args
from tutel.core.commands import (
    AddTask,
    CompleteIndices,
    EditTask,
    MarkCompletion,
    NewProject,
    PrintCompletion,
    RemoveProject,
    RemoveTask,
    Show,
)
from tutel.errors import InvalidSelector
from tutel.tasks.task_models import All, Completed, Indexed


def test_no_subcommand_shows_list() -> None:
    assert parse_command([]) == Show()


def test_new_project() -> None:
    assert parse_command(["new"]) == NewProject(name=None, force=False)
    assert parse_command(["new", "groceries", "-f"]) == NewProject(name="groceries", force=True)


def test_add_joins_words_and_alias() -> None:
    assert parse_command(["add", "buy", "oat", "milk"]) == AddTask(desc="buy oat milk", completed=False)
    assert parse_command(["a", "-c", "done", "already"]) == AddTask(desc="done already", completed=True)


def test_add_requires_description() -> None:
    with pytest.raises(SystemExit) as exc:
        parse_command(["add"])
    assert exc.value.code == 2


def test_done_variants() -> None:
    assert parse_command(["done", "1", "3"]) == MarkCompletion(True, Indexed((1, 3)))
    assert parse_command(["d", "--all"]) == MarkCompletion(True, All())
    assert parse_command(["done", "-n", "2"]) == MarkCompletion(False, Indexed((2,)))


def test_rm_variants() -> None:
    assert parse_command(["rm", "0"]) == RemoveTask(Indexed((0,)))
    assert parse_command(["rm", "-a"]) == RemoveTask(All())
    assert parse_command(["rm", "--cleanup"]) == RemoveTask(Completed())
    assert parse_command(["rm", "--project"]) == RemoveProject()


@pytest.mark.parametrize(
    "argv",
    [
        ["done"],
        ["done", "1", "--all"],
        ["rm"],
        ["rm", "-a", "-c"],
        ["rm", "2", "--cleanup"],
        ["rm", "--project", "1"],
        ["rm", "--project", "--all"],
    ],
)
def test_conflicting_or_missing_selection(argv: list[str]) -> None:
    with pytest.raises(InvalidSelector):
        parse_command(argv)


def test_indices_must_be_non_negative_integers() -> None:
    for bad in ("x", "-1", "1.5"):
        with pytest.raises(SystemExit):
            parse_command(["rm", "--", bad])


def test_edit_uses_flag_then_default_editor() -> None:
    assert parse_command(["edit", "3", "-e", "nano"], default_editor="vim") == EditTask(editor="nano", index=3)
    assert parse_command(["e", "3"], default_editor="vim") == EditTask(editor="vim", index=3)
    assert parse_command(["edit", "3"]) == EditTask(editor="", index=3)


def test_completions() -> None:
    assert parse_command(["completions", "zsh"]) == PrintCompletion("zsh")
    with pytest.raises(SystemExit):
        parse_command(["completions", "tcsh"])


def test_hidden_complete_indices() -> None:
    assert parse_command(["__complete-indices", "--", "1", ""]) == CompleteIndices(("1", ""))
    assert parse_command(["__complete-indices"]) == CompleteIndices(())


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        parse_command(["--version"])
    assert exc.value.code == 0
    assert capsys.readouterr().out.startswith("tutel v")


def test_selector_from_args() -> None:
    assert selector_from_args([4, 4]) == Indexed((4, 4))
    assert selector_from_args([], select_all=True) == All()
    assert selector_from_args([], completed=True) == Completed()
    with pytest.raises(InvalidSelector):
        selector_from_args([])
