"""Exceptions specific to the package."""

from __future__ import annotations


class ISBNPartsError(Exception):
    """Base package exception."""


class ISBNDecodeError(ISBNPartsError, ValueError):
    """Raised when a decoded scalar value is not a valid ISBN.

    Parsing itself never raises for bad input and returns `None` instead. This
    exception is for the structured data boundary, where a value that fails to
    parse means the data are corrupted.
    """

    def __init__(self, value: object, message: str | None = None):
        """Creates an exception with ``message`` for the decoded ``value``."""
        message = message or f"invalid ISBN '{value}'"
        super().__init__(message)
        self.message = message
        self.value = value

        self.add_note(f"\nProblematic value: {self.value!r}")

    def __str__(self) -> str:
        return self.message
