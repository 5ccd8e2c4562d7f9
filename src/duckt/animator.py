"""Progressive message reveal with alternating mouth frames.

The message is revealed one UTF-8 character at a time. Each prefix is drawn
twice, first with the open mouth and then with the closed mouth, and every
frame overwrites the previous one in place.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from rich.cells import cell_len
from rich.console import Console
from rich.control import Control
from rich.segment import ControlType

from duckt.template import Template


@dataclass(frozen=True)
class Frame:
    """One animation step: a template and how many message bytes it shows."""

    template: Template
    length: int

    def render(self, message: bytes) -> str:
        return self.template.render(message, self.length)


def codepoint_step(message: bytes, offset: int) -> int:
    """Get the byte size of the character starting at ``offset``.

    The size of a multi-byte character is the number of leading one-bits in
    its lead byte. Anything that cannot start a multi-byte character (ASCII,
    a stray continuation byte, the end of the message) steps by one so the
    reveal always moves forward.

    Args:
        message: UTF-8 encoded message.
        offset: Byte offset of the character.

    Returns:
        Number of bytes to advance, always at least 1.
    """
    if offset >= len(message):
        return 1

    byte = message[offset]
    if byte < 0x80:
        return 1

    return 8 - (~byte & 0xFF).bit_length()


def reveal_extents(message: bytes) -> Iterator[int]:
    """Yield the byte length of each successively longer revealed prefix.

    Every extent lands on a character boundary; the last one is the full
    message length. An empty message yields nothing.
    """
    extent = 0
    while True:
        extent += codepoint_step(message, extent)
        if extent > len(message):
            return
        yield extent


def plan_frames(open_mouth: Template, closed_mouth: Template, message: bytes) -> Iterator[Frame]:
    """Lazily enumerate the frames of the reveal animation."""
    for extent in reveal_extents(message):
        yield Frame(open_mouth, extent)
        yield Frame(closed_mouth, extent)


class RevealAnimator:
    """Draws the duck onto a Rich console.

    Frame text goes straight to the console's file so it reaches the
    terminal byte for byte; rich only supplies the cursor control codes.
    """

    def __init__(
        self,
        console: Console,
        delay: float,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialise the animator.

        Args:
            console: Console to draw on.
            delay: Pause after each animated frame, in seconds.
            sleep: Function used to pause; tests pass a recorder.
        """
        self._console = console
        self._delay = delay
        self._sleep = sleep
        self._height = 0

    def run(
        self,
        open_mouth: Template,
        closed_mouth: Template,
        message: bytes,
        animate: bool,
    ) -> None:
        """Say ``message``, animated or all at once."""
        if not animate:
            self._write(Frame(open_mouth, len(message)).render(message) + "\n")
            return

        self._height = 0
        for frame in plan_frames(open_mouth, closed_mouth, message):
            self._draw(frame.render(message))
        self._write("\n")

    def _draw(self, text: str) -> None:
        if self._height:
            self._console.control(self._position_cursor())
        self._write(text)
        self._height = self._measure(text)
        self._sleep(self._delay)

    def _write(self, text: str) -> None:
        """Write text unchanged, keeping surrogate-escaped message bytes."""
        file = self._console.file
        buffer = getattr(file, "buffer", None)
        if buffer is None:
            file.write(text)
        else:
            file.flush()
            buffer.write(text.encode("utf-8", errors="surrogateescape"))
            buffer.flush()
        file.flush()

    def _measure(self, text: str) -> int:
        """Count the screen lines a frame covers, including wrapped ones."""
        width = max(self._console.width, 1)
        return sum(max(1, -(-cell_len(line) // width)) for line in text.split("\n"))

    def _position_cursor(self) -> Control:
        """Get control codes that erase the last frame and return to its start."""
        return Control(
            ControlType.CARRIAGE_RETURN,
            (ControlType.ERASE_IN_LINE, 2),
            *(((ControlType.CURSOR_UP, 1), (ControlType.ERASE_IN_LINE, 2)) * (self._height - 1)),
        )
