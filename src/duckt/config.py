"""Run configuration for duckt."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from duckt.art import DEFAULT_CLOSED_MOUTH, DEFAULT_OPEN_MOUTH
from duckt.template import Template, validate_template

AnimationMode = Literal["auto", "none", "force"]

DEFAULT_DELAY_US = 100_000


class DucktConfig(BaseModel):
    """Everything one run of duckt needs, fixed at startup."""

    model_config = ConfigDict(frozen=True)

    open_mouth: Template
    closed_mouth: Template
    message: str = ""
    delay_us: int = Field(default=DEFAULT_DELAY_US, ge=0)
    animation: AnimationMode = "auto"

    @classmethod
    def from_options(
        cls,
        message: str = "",
        open_mouth: str = DEFAULT_OPEN_MOUTH,
        closed_mouth: str = DEFAULT_CLOSED_MOUTH,
        delay_us: int = DEFAULT_DELAY_US,
        animation: AnimationMode = "auto",
    ) -> DucktConfig:
        """Build a config from raw command-line values.

        Raises:
            TemplateValidationError: If either mouth template lacks ``TEXT``.
        """
        return cls(
            open_mouth=validate_template(open_mouth, "open-mouth"),
            closed_mouth=validate_template(closed_mouth, "closed-mouth"),
            message=message,
            delay_us=delay_us,
            animation=animation,
        )

    @property
    def delay(self) -> float:
        """Frame delay in seconds."""
        return self.delay_us / 1_000_000

    @property
    def message_bytes(self) -> bytes:
        """The message as UTF-8, keeping any undecodable argv bytes."""
        return self.message.encode("utf-8", errors="surrogateescape")

    def should_animate(self, is_terminal: bool) -> bool:
        """Resolve the animation mode against the output destination."""
        if self.animation == "auto":
            return is_terminal
        return self.animation == "force"
