"""Domain entity — pure Python business object for a date-stamped JSON record."""

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from records_api.domain.exceptions import InvalidRecordDateError

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@dataclass
class Record:
    """A client-supplied JSON payload filed under a calendar date.

    ``id`` and ``created_at`` are assigned by the storage layer on insert and
    stay ``None`` until the record has been persisted.
    """

    date: date
    data: dict[str, Any]
    id: int | None = None
    created_at: datetime | None = None


def parse_record_date(value: str | None) -> date:
    """Parse a strict ``YYYY-MM-DD`` calendar date."""
    if value is None or not _DATE_PATTERN.match(value):
        raise InvalidRecordDateError(value)
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise InvalidRecordDateError(value) from None
