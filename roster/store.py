"""Record store: the authoritative roster plus its backing file.

Data flow per mutation:
1. Validate input (required fields, key present / absent)
2. Mutate the in-memory list
3. Rewrite the whole backing file

Lookups are linear scans. Rosters are classroom-sized, and insertion order
is the order records are listed and written in.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Iterator, Optional

from roster.errors import DuplicateKey, NotFound, StoreIOError, ValidationError
from roster.models import StudentRecord


def _check_single_line(record: StudentRecord) -> None:
    if record.has_line_break():
        raise ValidationError("Values cannot contain line breaks!")


class RecordStore:
    """In-memory roster persisted to a comma-delimited text file.

    Not safe for concurrent writers; callers serialize access themselves.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._records: list[StudentRecord] = []

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def records(self) -> list[StudentRecord]:
        """Snapshot of the roster in store order."""
        return list(self._records)

    @property
    def count(self) -> int:
        return len(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[StudentRecord]:
        return iter(list(self._records))

    def __contains__(self, roll_number: object) -> bool:
        return isinstance(roll_number, str) and self.find_by_key(roll_number) is not None

    def find_by_key(self, roll_number: str) -> Optional[StudentRecord]:
        """Return the record with this roll number (any case), or None."""
        for record in self._records:
            if record.matches_key(roll_number):
                return record
        return None

    def get(self, roll_number: str) -> StudentRecord:
        """Like find_by_key but raises NotFound."""
        record = self.find_by_key(roll_number)
        if record is None:
            raise NotFound(roll_number)
        return record

    def search(self, query: str = "") -> Iterator[StudentRecord]:
        """Yield records where any field contains query, ignoring case.

        A blank query yields the whole roster; any other query is matched
        as given, surrounding spaces included. Each call starts a fresh pass.
        """
        blank = not query.strip()
        for record in list(self._records):
            if blank or record.contains(query):
                yield record

    # ------------------------------------------------------------------
    # Mutations (each one rewrites the backing file)
    # ------------------------------------------------------------------

    def add(self, record: StudentRecord) -> StudentRecord:
        """Append a new record and save.

        Raises:
            ValidationError: roll number or name is empty, or a value holds
                a line break.
            DuplicateKey: the roll number is already on the roster.
        """
        if not record.roll_number.strip() or not record.name.strip():
            raise ValidationError("Roll Number and Name are required!")
        _check_single_line(record)
        if self.find_by_key(record.roll_number) is not None:
            raise DuplicateKey(record.roll_number)

        self._records.append(record)
        self.save_all()
        return record

    def update(
        self,
        roll_number: str,
        *,
        name: str,
        course: str,
        grade: str,
        email: str,
        contact: str,
    ) -> StudentRecord:
        """Overwrite every field except the roll number, then save.

        All mutable fields are supplied together; the key never changes.

        Raises:
            NotFound: no record has this roll number.
            ValidationError: name is empty, or a value holds a line break.
        """
        current = self.get(roll_number)
        if not name.strip():
            raise ValidationError("Name is required!")
        record = replace(
            current, name=name, course=course, grade=grade, email=email, contact=contact,
        )
        _check_single_line(record)

        index = next(i for i, r in enumerate(self._records) if r is current)
        self._records[index] = record
        self.save_all()
        return record

    def delete(self, roll_number: str) -> int:
        """Remove every record matching roll number (any case), then save.

        Returns the number of records removed.

        Raises:
            NotFound: nothing matched; the roster is untouched.
        """
        kept = [r for r in self._records if not r.matches_key(roll_number)]
        removed = len(self._records) - len(kept)
        if removed == 0:
            raise NotFound(roll_number)

        self._records = kept
        self.save_all()
        return removed

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load_all(self) -> int:
        """Replace the roster with the backing file's contents.

        Lines with fewer than six fields are skipped without complaint.
        Bytes that are not valid UTF-8 are replaced, not rejected.
        A missing file leaves the roster as it is. Returns the number of
        records loaded.

        Raises:
            StoreIOError: the file exists but could not be read.
        """
        if not self.path.exists():
            return 0

        loaded: list[StudentRecord] = []
        try:
            with open(self.path, "r", encoding="utf-8", errors="replace", newline="\n") as f:
                for line in f:
                    record = StudentRecord.from_line(line)
                    if record is not None:
                        loaded.append(record)
        except OSError as e:
            raise StoreIOError(f"Load Failed: {e}") from e

        self._records = loaded
        return len(loaded)

    def save_all(self) -> None:
        """Rewrite the backing file from the roster, one record per line.

        Raises:
            StoreIOError: the write did not complete. The in-memory roster
                is kept; the file is out of date until the next good save.
        """
        try:
            with open(self.path, "w", encoding="utf-8", newline="\n") as f:
                for record in self._records:
                    f.write(record.to_line())
                    f.write("\n")
        except OSError as e:
            raise StoreIOError(f"Save Failed: {e}") from e
