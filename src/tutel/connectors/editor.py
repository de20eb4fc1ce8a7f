# src/tutel/connectors/editor.py

from __future__ import annotations

import contextlib
import logging
import os
import shlex
import subprocess
import tempfile
from pathlib import Path

from ..core.ports import Cancelled, Changed, EditResult
from ..errors import (
    EditorLaunchFailed,
    EditorNotConfigured,
    EditorReadFailed,
    InvalidEditorCommand,
)

logger = logging.getLogger(__name__)


class SubprocessEditor:
    """
    Edit text in an external editor process.

    The command is split like a shell would ("code --wait" works), the temp
    file path is appended, and the call blocks until the editor exits.
    A non-zero exit status or an unchanged text counts as cancellation.
    """

    def __init__(self, command: str) -> None:
        self.command = command
        try:
            self._argv = shlex.split(command)
        except ValueError as e:
            raise InvalidEditorCommand(command, str(e)) from e
        if not self._argv:
            raise EditorNotConfigured()

    def invoke(self, current_text: str) -> EditResult:
        fd, name = tempfile.mkstemp(prefix="tutel-", suffix=".txt")
        path = Path(name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(current_text + "\n")

            try:
                proc = subprocess.run([*self._argv, str(path)], check=False)
            except OSError as e:
                raise EditorLaunchFailed(self.command, e) from e

            if proc.returncode != 0:
                logger.info("Editor exited with status %s; edit cancelled.", proc.returncode)
                return Cancelled()

            try:
                text = path.read_text("utf-8").rstrip()
            except UnicodeDecodeError as e:
                raise EditorReadFailed(path, "not valid UTF-8") from e
            except OSError as e:
                raise EditorReadFailed(path, e.strerror or str(e)) from e
        finally:
            with contextlib.suppress(OSError):
                path.unlink()

        if text == current_text.rstrip():
            return Cancelled()
        return Changed(text)
