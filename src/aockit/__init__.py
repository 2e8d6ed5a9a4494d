"""aockit — generic containers and input helpers for puzzle solving."""

__version__ = "0.1.0"
