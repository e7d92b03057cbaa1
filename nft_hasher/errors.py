from __future__ import annotations

"""Base exception shared by the input, hashing and pipeline layers."""

__all__ = [
    "ProcessingError",
]


class ProcessingError(Exception):
    """Base exception for errors that abort a processing run."""
    pass
