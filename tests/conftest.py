"""Shared pytest fixtures."""

from typing import Any, List, Tuple

import pytest

from askterm.config import AskTermConfig
from askterm.inputline.abstract import InputLine
from askterm.prompt.exceptions import UserExit
from askterm.terminal.abstract import TerminalBackend


class RecordingTerminal(TerminalBackend):
    """Terminal that records every operation instead of drawing."""

    def __init__(self) -> None:
        self.calls: List[Tuple[Any, ...]] = []

    def cursor_left(self, columns: int) -> None:
        self.calls.append(("cursor_left", columns))

    def cursor_up(self, lines: int) -> None:
        self.calls.append(("cursor_up", lines))

    def erase_line(self) -> None:
        self.calls.append(("erase_line",))

    def flush(self) -> None:
        self.calls.append(("flush",))

    def reset_attributes(self) -> None:
        self.calls.append(("reset_attributes",))

    def set_foreground(self, color: str) -> None:
        self.calls.append(("set_foreground", color))

    def stylize(self, text: str, color: str) -> str:
        return f"<{color}>{text}</{color}>"

    def write(self, text: str) -> None:
        self.calls.append(("write", text))

    def count(self, operation: str) -> int:
        return sum(1 for call in self.calls if call[0] == operation)

    def written(self) -> str:
        return "".join(call[1] for call in self.calls if call[0] == "write")


class ScriptedInputLine(InputLine):
    """Input line that answers with a fixed list of lines."""

    def __init__(self, answers: List[str]) -> None:
        self.answers = list(answers)
        self.messages: List[str] = []

    def read_line(self, message: str) -> str:
        self.messages.append(message)
        if not self.answers:
            raise UserExit("No more scripted answers")
        return self.answers.pop(0)


@pytest.fixture
def terminal():
    """A terminal that records operations."""
    return RecordingTerminal()


@pytest.fixture
def config():
    """The default configuration."""
    return AskTermConfig.make_default()


@pytest.fixture
def scripted_input():
    """Factory for input lines answering with the given lines."""

    def make(*answers: str) -> ScriptedInputLine:
        return ScriptedInputLine(list(answers))

    return make
