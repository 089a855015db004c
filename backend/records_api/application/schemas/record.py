"""Pydantic DTOs (Data Transfer Objects) for the Record feature."""

import datetime as dt
from typing import Any

from pydantic import BaseModel, Field, field_serializer, field_validator

from records_api.domain.entities import parse_record_date
from records_api.domain.exceptions import InvalidRecordDateError


class RecordCreate(BaseModel):
    """Schema for creating a new record."""

    date: dt.date = Field(..., examples=["2024-03-01"])
    data: dict[str, Any] = Field(..., examples=[{"temp": 21.5}])

    @field_validator("date", mode="before")
    @classmethod
    def _strict_date(cls, value: Any) -> Any:
        if isinstance(value, dt.date):
            return value
        if not isinstance(value, str):
            raise ValueError("date must be a YYYY-MM-DD string")
        try:
            return parse_record_date(value)
        except InvalidRecordDateError as e:
            raise ValueError(str(e)) from None


class RecordResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    date: dt.date
    data: dict[str, Any]
    created_at: dt.datetime

    model_config = {"from_attributes": True}

    @field_serializer("date")
    def _serialize_date(self, value: dt.date) -> str:
        # Dates go out as midnight UTC timestamps, the format existing clients parse
        return dt.datetime.combine(value, dt.time.min, tzinfo=dt.timezone.utc).strftime(
            "%Y-%m-%dT%H:%M:%SZ"
        )
