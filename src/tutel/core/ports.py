# src/tutel/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The interpreter depends on these Protocols instead of spawning processes or
writing shell scripts itself, so tests can plug in fakes.
"""

from dataclasses import dataclass
from typing import Callable, Protocol


@dataclass(frozen=True, slots=True)
class Changed:
    text: str


@dataclass(frozen=True, slots=True)
class Cancelled:
    pass


EditResult = Changed | Cancelled


class EditorLauncher(Protocol):
    """Let the user edit `current_text` interactively; blocks until done."""
    def invoke(self, current_text: str) -> EditResult: ...


# Builds a launcher for the editor command given on the command line / $EDITOR.
EditorFactory = Callable[[str], EditorLauncher]


class CompletionPrinter(Protocol):
    """Static shell completion scripts."""
    def script_for(self, shell: str) -> str: ...
