from .app import EXIT_FATAL, EXIT_SUCCESS, EXIT_USAGE, UsageError, main

__all__ = [
    "EXIT_FATAL",
    "EXIT_SUCCESS",
    "EXIT_USAGE",
    "UsageError",
    "main",
]
