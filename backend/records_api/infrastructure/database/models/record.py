"""SQLAlchemy ORM model for the Record entity."""

import datetime as dt
from typing import Any

from sqlalchemy import JSON, BigInteger, Date, DateTime, Index, Integer, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from records_api.infrastructure.database.base import Base

# BIGINT identity on PostgreSQL; SQLite only autoincrements INTEGER primary keys
_ID_TYPE = BigInteger().with_variant(Integer(), "sqlite")
_JSON_TYPE = JSON().with_variant(JSONB(), "postgresql")


class RecordModel(Base):
    """ORM model — maps to the 'records' table."""

    __tablename__ = "records"

    id: Mapped[int] = mapped_column(_ID_TYPE, primary_key=True, autoincrement=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    data: Mapped[dict[str, Any]] = mapped_column(_JSON_TYPE, nullable=False)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_records_date", "date"),
        # Reserved for containment (@>) queries on the payload
        Index("ix_records_data", "data", postgresql_using="gin"),
    )

    def __repr__(self) -> str:
        return f"<RecordModel(id={self.id}, date={self.date})>"
