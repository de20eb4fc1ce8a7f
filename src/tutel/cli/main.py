# src/tutel/cli/main.py

"""
CLI entrypoint.

Initializes logging, parses argv into a Command, runs it against the
project owning the current directory and prints the result.
Exit status: 0 on success, 1 on a tutel error, 2 on a usage error.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from ..config import Settings, get_settings
from ..connectors.console import render_project
from ..core.commands import CompleteIndices, PrintCompletion, Show
from ..core.ports import EditorFactory
from ..errors import TutelError
from ..logging_setup import setup_logging
from .bootstrap import create_interpreter
from .parser import parse_command

logger = logging.getLogger(__name__)


def main(
    argv: Sequence[str] | None = None,
    *,
    cwd: Path | None = None,
    settings: Settings | None = None,
    editor_factory: EditorFactory | None = None,
) -> int:
    if settings is None:
        settings = get_settings()

    console_level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(console_level, int):
        console_level = logging.WARNING
    setup_logging(console_level=console_level, log_file=settings.log_file)

    interpreter = create_interpreter(settings=settings, editor_factory=editor_factory)
    start = cwd or Path.cwd()

    try:
        command = parse_command(argv, default_editor=settings.editor)
        logger.debug("%s %s cwd=%s", settings.app_name, command, start)
        result = interpreter.execute(command, cwd=start)
    except TutelError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    # Only Show and the completion helpers write to stdout; mutations are silent.
    if isinstance(command, Show) and result.project is not None:
        print(render_project(result.project, color=settings.color))
    elif isinstance(command, (PrintCompletion, CompleteIndices)) and result.output:
        print(result.output, end="" if result.output.endswith("\n") else "\n")

    return 0


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
