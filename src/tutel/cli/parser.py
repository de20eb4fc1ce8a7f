# src/tutel/cli/parser.py

"""
Argument parser: argv -> Command.

Running without a subcommand shows the todo list.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .. import __version__
from ..connectors.completions import Shell
from ..core.commands import (
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
from ..errors import InvalidSelector
from ..tasks.task_models import All, Completed, Indexed, TaskSelector

COMPLETE_INDICES_CMD = "__complete-indices"


def _index(raw: str) -> int:
    if not raw.isdigit():
        raise argparse.ArgumentTypeError(f"not a valid index: {raw}")
    return int(raw)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tutel",
        description="tutel\na minimalistic todo app for terminal enthusiasts",
        epilog="run without a subcommand to show the todo list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s v{__version__}")

    sub = parser.add_subparsers(dest="cmd", required=False, metavar="COMMAND")

    new = sub.add_parser("new", help="create a new project", description="create a new project in the current directory")
    new.add_argument("name", nargs="?", help="project name (default: the directory name)")
    new.add_argument("-f", "--force", action="store_true", help="force project creation")

    add = sub.add_parser("add", aliases=["a"], help="add a new task", description="add a new task. aliases: a")
    add.add_argument("description", nargs="+", help="the task description")
    add.add_argument("-c", "--completed", action="store_true", help="mark the task as already completed")

    done = sub.add_parser(
        "done", aliases=["d"], help="mark a task as being completed", description="mark a task as being done. aliases: d"
    )
    done.add_argument("indices", nargs="*", type=_index, help="task indices")
    done.add_argument("-a", "--all", action="store_true", help="select all tasks")
    done.add_argument("-n", "--not", dest="not_done", action="store_true", help="mark the task as not being done")

    rm = sub.add_parser("rm", help="remove a task", description="remove a task from a project")
    rm.add_argument("indices", nargs="*", type=_index, help="task indices")
    rm.add_argument("-a", "--all", action="store_true", help="remove all tasks")
    rm.add_argument("-c", "--cleanup", action="store_true", help="remove all completed tasks")
    rm.add_argument("--project", action="store_true", help="remove the whole project file")

    edit = sub.add_parser(
        "edit", aliases=["e"], help="edit an existing task", description="edit an existing task. aliases: e"
    )
    edit.add_argument("index", type=_index, help="task index")
    edit.add_argument("-e", "--editor", help="the editor to use (default: $EDITOR)")

    completions = sub.add_parser(
        "completions", help="print shell completions", description="print shell completions for the given shell"
    )
    completions.add_argument("shell", choices=[s.value for s in Shell])

    # Used by the completion scripts; not listed in --help.
    hidden = sub.add_parser(COMPLETE_INDICES_CMD)
    hidden.add_argument("words", nargs="*")

    return parser


def selector_from_args(
    indices: Sequence[int],
    *,
    select_all: bool = False,
    completed: bool = False,
) -> TaskSelector:
    """Exactly one of: explicit indices, --all, --cleanup."""
    given = sum([bool(indices), select_all, completed])
    if given > 1:
        raise InvalidSelector("task indices, --all and --cleanup are mutually exclusive")
    if select_all:
        return All()
    if completed:
        return Completed()
    if not indices:
        raise InvalidSelector("one or more task indices are required")
    return Indexed(tuple(indices))


def command_from_args(args: argparse.Namespace, *, default_editor: str | None = None) -> Command:
    cmd = args.cmd

    if cmd is None:
        return Show()

    if cmd == "new":
        return NewProject(name=args.name, force=args.force)

    if cmd in ("add", "a"):
        return AddTask(desc=" ".join(args.description), completed=args.completed)

    if cmd in ("done", "d"):
        selector = selector_from_args(args.indices, select_all=args.all)
        return MarkCompletion(not args.not_done, selector)

    if cmd == "rm":
        if args.project:
            if args.indices or args.all or args.cleanup:
                raise InvalidSelector("--project cannot be combined with a task selection")
            return RemoveProject()
        return RemoveTask(selector_from_args(args.indices, select_all=args.all, completed=args.cleanup))

    if cmd in ("edit", "e"):
        return EditTask(editor=args.editor or default_editor or "", index=args.index)

    if cmd == "completions":
        return PrintCompletion(args.shell)

    if cmd == COMPLETE_INDICES_CMD:
        return CompleteIndices(tuple(args.words))

    raise ValueError(f"unhandled subcommand: {cmd}")


def parse_command(argv: Sequence[str] | None = None, *, default_editor: str | None = None) -> Command:
    """Parse argv into a Command. argparse usage errors exit with status 2."""
    args = build_parser().parse_args(argv)
    return command_from_args(args, default_editor=default_editor)
