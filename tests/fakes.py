# tests/fakes.py

from __future__ import annotations

from tutel.core.ports import Cancelled, EditResult


class FakeEditor:
    """
    Scripted editor for interpreter tests.

    Doubles as its own factory: calling it records the editor command and
    returns itself, so `editor_factory=fake` works directly.
    """

    def __init__(self, result: EditResult | None = None) -> None:
        self.result: EditResult = result if result is not None else Cancelled()
        self.commands: list[str] = []
        self.calls: list[str] = []

    def __call__(self, command: str) -> FakeEditor:
        self.commands.append(command)
        return self

    def invoke(self, current_text: str) -> EditResult:
        self.calls.append(current_text)
        return self.result
