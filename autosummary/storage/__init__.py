"""Persistent storage for the generated summary."""

from .summary_file import fingerprint, persist_if_changed

__all__ = [
    "fingerprint",
    "persist_if_changed",
]
