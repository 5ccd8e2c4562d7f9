"""Mouth templates: validation, escaping and rendering.

A raw template is free text containing the placeholder ``TEXT``. Validation
turns it into a printf-style directive (literal ``%`` doubled, placeholder
rewritten to ``%.*s``) and splits that directive into the literal text that
surrounds the message.
"""

from __future__ import annotations

from dataclasses import dataclass

from duckt.errors import TemplateValidationError

PLACEHOLDER = "TEXT"
MARKER = "%.*s"


@dataclass(frozen=True)
class Template:
    """A validated mouth template.

    The message slice is inserted between ``head`` and ``tail`` when rendered.
    """

    head: str
    tail: str
    directive: str
    """The printf-style form, with ``%%`` literals and a single ``%.*s``."""

    @classmethod
    def from_directive(cls, directive: str) -> Template:
        """Split a directive into its literal segments.

        Args:
            directive: Escaped text holding exactly one ``%.*s`` marker.

        Returns:
            Template with unescaped head and tail.

        Raises:
            ValueError: If the directive has no marker, more than one, or a
                stray ``%``.
        """
        segments: list[list[str]] = [[]]
        i = 0
        while i < len(directive):
            if directive.startswith("%%", i):
                segments[-1].append("%")
                i += 2
            elif directive.startswith(MARKER, i):
                segments.append([])
                i += len(MARKER)
            elif directive[i] == "%":
                raise ValueError(f"Stray '%' at offset {i} in directive: {directive!r}")
            else:
                segments[-1].append(directive[i])
                i += 1

        if len(segments) != 2:
            raise ValueError(f"Directive must hold exactly one {MARKER}: {directive!r}")

        head, tail = ("".join(parts) for parts in segments)
        return cls(head=head, tail=tail, directive=directive)

    def render(self, message: bytes, length: int) -> str:
        """Render the template with at most ``length`` bytes of ``message``."""
        text = message[:length].decode("utf-8", errors="surrogateescape")
        return f"{self.head}{text}{self.tail}"


def escape_percent(raw: str) -> str:
    """Double every literal percent so it survives directive parsing."""
    parts: list[str] = []
    start = 0
    for i, char in enumerate(raw):
        if char == "%":
            parts.append(raw[start : i + 1])
            parts.append("%")
            start = i + 1
    parts.append(raw[start:])
    return "".join(parts)


def validate_template(raw: str, label: str) -> Template:
    """Validate a raw mouth template.

    Only the first ``TEXT`` becomes the substitution point; any later
    occurrence is kept as ordinary text.

    Args:
        raw: User-supplied template text.
        label: Which template this is (e.g. "open-mouth"), used in errors.

    Returns:
        The validated template.

    Raises:
        TemplateValidationError: If ``raw`` has no ``TEXT`` placeholder.
    """
    escaped = escape_percent(raw)

    index = escaped.find(PLACEHOLDER)
    if index == -1:
        raise TemplateValidationError(label)

    directive = escaped[:index] + MARKER + escaped[index + len(PLACEHOLDER) :]
    return Template.from_directive(directive)
