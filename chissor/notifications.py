"""
Error notifications shown to the user until dismissed.
"""

import itertools
from dataclasses import dataclass
from typing import Iterator, List


@dataclass
class ErrorRecord:
    id: int
    category: str
    message: str
    open: bool = True

    @property
    def title(self) -> str:
        return f"Error ({self.category})"


class NotificationCenter:
    """
    Append-only list of error records with user-driven dismissal.

    The presentation layer closes records by setting ``open`` to False and
    must call dismiss_closed() once per refresh, before showing the rest.
    """

    def __init__(self):
        self._records: List[ErrorRecord] = []
        self._ids = itertools.count()

    def record(self, category: str, error: BaseException) -> ErrorRecord:
        record = ErrorRecord(next(self._ids), category, str(error))
        self._records.append(record)
        return record

    def dismiss(self, record_id: int):
        """Close the record with ``record_id``. Unknown ids are ignored."""
        for record in self._records:
            if record.id == record_id:
                record.open = False

    def dismiss_closed(self):
        self._records = [record for record in self._records if record.open]

    def open_records(self) -> List[ErrorRecord]:
        return [record for record in self._records if record.open]

    def __iter__(self) -> Iterator[ErrorRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)
