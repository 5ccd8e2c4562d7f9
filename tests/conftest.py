"""Shared fixtures for duckt tests."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from duckt.art import DEFAULT_CLOSED_MOUTH, DEFAULT_OPEN_MOUTH
from duckt.template import Template, validate_template


class SleepRecorder:
    """Stands in for time.sleep and remembers every pause."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def sleeps() -> SleepRecorder:
    """A fake sleep function."""
    return SleepRecorder()


@pytest.fixture
def open_mouth() -> Template:
    """The default open-mouth template."""
    return validate_template(DEFAULT_OPEN_MOUTH, "open-mouth")


@pytest.fixture
def closed_mouth() -> Template:
    """The default closed-mouth template."""
    return validate_template(DEFAULT_CLOSED_MOUTH, "closed-mouth")


@pytest.fixture
def plain_console() -> Console:
    """A console writing to a string buffer, as if output were piped."""
    return Console(file=io.StringIO(), force_terminal=False, color_system=None, width=120)


@pytest.fixture
def terminal_console(monkeypatch: pytest.MonkeyPatch) -> Console:
    """A console writing to a string buffer that behaves like a terminal."""
    monkeypatch.setenv("TERM", "xterm-256color")
    return Console(file=io.StringIO(), force_terminal=True, color_system=None, width=120)

