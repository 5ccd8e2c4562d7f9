"""Exceptions raised by duckt."""

from __future__ import annotations


class DucktError(Exception):
    """Base class for duckt errors."""


class TemplateValidationError(DucktError):
    """A mouth template lacks the ``TEXT`` placeholder."""

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(
            f"the {label} format must have exactly one string parameter (TEXT)."
        )
