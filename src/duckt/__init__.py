"""duckt - a duck that says things."""

__version__ = "0.1.0"
