"""ASCII art for the duck's mouth frames.

Each frame is a raw template: the word ``TEXT`` marks where the message goes.
"""

from __future__ import annotations

DEFAULT_OPEN_MOUTH = "(^)= -{TEXT}"
DEFAULT_CLOSED_MOUTH = "(^)- -{TEXT}"
