"""Data models for the roster store.

StudentRecord plus the line codec used by the backing file. All fields are
plain text; nothing beyond the key and name is validated.
"""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import Optional

# Order of fields on disk (one record per line, comma-joined).
FILE_FIELDS = ("name", "roll_number", "course", "grade", "email", "contact")

# Order of fields in tables and search.
DISPLAY_FIELDS = ("roll_number", "name", "course", "grade", "email", "contact")

DELIMITER = ","

# Offered as defaults by the CLI, never enforced.
SUGGESTED_COURSES = [
    "Bachelor of Computer Applications",
    "Bachelor of Arts",
    "Bachelor of Technology",
    "Master of Computer Applications",
    "Master of Arts",
    "Master of Technology",
    "Psychology",
]


@dataclass(frozen=True)
class StudentRecord:
    """One student on the roster.

    Immutable; the store swaps in a new instance on update.
    """

    roll_number: str
    name: str
    course: str = ""
    grade: str = ""
    email: str = ""
    contact: str = ""

    @property
    def key(self) -> str:
        """Comparison form of the roll number (case and surrounding spaces ignored)."""
        return self.roll_number.strip().lower()

    def matches_key(self, roll_number: str) -> bool:
        return self.key == roll_number.strip().lower()

    def fields(self) -> tuple[str, ...]:
        """Field values in display order."""
        return tuple(getattr(self, name) for name in DISPLAY_FIELDS)

    def contains(self, query: str) -> bool:
        """True if any field contains query, ignoring case.

        An empty query matches every record.
        """
        q = query.lower()
        return any(q in value.lower() for value in self.fields())

    def has_delimiter(self) -> bool:
        """True if some value would break the comma-delimited line format."""
        return any(DELIMITER in value for value in astuple(self))

    def has_line_break(self) -> bool:
        """True if some value would split across lines in the backing file."""
        return any("\n" in value or "\r" in value for value in astuple(self))

    def to_line(self) -> str:
        """Serialize to a single backing-file line (no newline, no quoting)."""
        return DELIMITER.join(getattr(self, name) for name in FILE_FIELDS)

    @classmethod
    def from_line(cls, line: str) -> Optional[StudentRecord]:
        """Parse a backing-file line.

        Returns None for lines with fewer than six fields. Anything past the
        sixth field is ignored.
        """
        parts = line.rstrip("\r\n").split(DELIMITER)
        if len(parts) < len(FILE_FIELDS):
            return None
        return cls(**dict(zip(FILE_FIELDS, parts)))

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "roll_number": self.roll_number,
            "name": self.name,
            "course": self.course,
            "grade": self.grade,
            "email": self.email,
            "contact": self.contact,
        }

    @classmethod
    def from_dict(cls, d: dict) -> StudentRecord:
        return cls(
            roll_number=d.get("roll_number", ""),
            name=d.get("name", ""),
            course=d.get("course", ""),
            grade=d.get("grade", ""),
            email=d.get("email", ""),
            contact=d.get("contact", ""),
        )
