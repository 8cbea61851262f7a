"""Exceptions raised by the record store.

Each kind also subclasses the builtin a caller would naturally catch, so
``except KeyError`` still handles a missing roll number.
"""

from __future__ import annotations


class RosterError(Exception):
    """Base class for all record store failures."""


class ValidationError(RosterError, ValueError):
    """A required field (roll number or name) is empty."""


class DuplicateKey(RosterError, ValueError):
    """A record with the same roll number already exists."""

    def __init__(self, roll_number: str) -> None:
        super().__init__(f"Roll Number '{roll_number}' already exists!")
        self.roll_number = roll_number


class NotFound(RosterError, KeyError):
    """No record has the given roll number."""

    def __init__(self, roll_number: str) -> None:
        super().__init__(f"Could not find student with Roll No: {roll_number}")
        self.roll_number = roll_number

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]


class StoreIOError(RosterError, OSError):
    """The backing file could not be read or written."""
