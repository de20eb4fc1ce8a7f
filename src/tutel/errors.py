# src/tutel/errors.py

"""
Error taxonomy.

Every error is terminal for the current invocation. The CLI entry point
prints the message once (no traceback) and exits with status 1.
"""

from __future__ import annotations

from pathlib import Path


class TutelError(Exception):
    """Base class for all user-facing errors."""


class ProjectNotFound(TutelError):
    def __init__(self, start: Path) -> None:
        super().__init__(
            f"no project found in {start} or any parent directory "
            "(create one with `tutel new`)"
        )
        self.start = start


class ProjectAlreadyExists(TutelError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"a project already exists at {path} (use --force to overwrite)")
        self.path = path


class MalformedProjectFile(TutelError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"malformed project file {path}: {reason}")
        self.path = path
        self.reason = reason


class ProjectIOError(TutelError):
    """Wraps an OSError raised while reading, writing or deleting a project file."""

    def __init__(self, path: Path, action: str, cause: OSError) -> None:
        detail = cause.strerror or str(cause)
        super().__init__(f"could not {action} {path}: {detail}")
        self.path = path
        self.action = action


class IndexNotFound(TutelError):
    def __init__(self, index: int) -> None:
        super().__init__(f"no task with index {index}")
        self.index = index


class EmptyDescription(TutelError):
    def __init__(self) -> None:
        super().__init__("the task description must not be empty")


class InvalidSelector(TutelError):
    """Selection flags conflict, or no selection was given where one is required."""


class EditorNotConfigured(TutelError):
    def __init__(self) -> None:
        super().__init__("no editor configured (pass --editor or set $EDITOR)")


class UnsupportedShell(TutelError):
    def __init__(self, shell: str, supported: tuple[str, ...]) -> None:
        super().__init__(f"unsupported shell {shell!r} (choose from {', '.join(supported)})")
        self.shell = shell


class EditorLaunchFailed(TutelError):
    def __init__(self, command: str, cause: OSError) -> None:
        detail = cause.strerror or str(cause)
        super().__init__(f"could not start editor {command!r}: {detail}")
        self.command = command


class InvalidEditorCommand(TutelError):
    def __init__(self, command: str, reason: str) -> None:
        super().__init__(f"invalid editor command {command!r}: {reason}")
        self.command = command


class EditorReadFailed(TutelError):
    """The editor exited but its temp file could not be read back as UTF-8 text."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"could not read edited text from {path}: {reason}")
        self.path = path
