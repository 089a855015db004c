"""Concrete repository implementation for Record backed by SQLAlchemy."""

import logging
from datetime import date, timezone

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from records_api.application.interfaces import RecordRepository
from records_api.domain.entities import Record
from records_api.domain.exceptions import StorageError
from records_api.infrastructure.database.models import RecordModel

logger = logging.getLogger(__name__)


class SQLAlchemyRecordRepository(RecordRepository):
    """Implements the RecordRepository port using SQLAlchemy async sessions.

    ``create`` owns its transaction: it commits before returning and rolls
    back on failure. A cancelled call leaves the transaction uncommitted and
    the session context discards it on release.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: RecordModel) -> Record:
        """Map ORM model → domain entity."""
        if not isinstance(model.data, dict):
            raise StorageError(
                "decode record",
                f"record {model.id} holds {type(model.data).__name__}, expected a JSON object",
            )
        created_at = model.created_at
        # SQLite hands back naive timestamps; CURRENT_TIMESTAMP is UTC
        if created_at is not None and created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return Record(
            id=model.id,
            date=model.date,
            data=model.data,
            created_at=created_at,
        )

    async def _rollback(self) -> None:
        """Discard the current transaction; the original error is what gets reported."""
        try:
            await self._session.rollback()
        except SQLAlchemyError:
            logger.warning("Rollback failed; connection will be discarded", exc_info=True)

    def _to_model(self, entity: Record) -> RecordModel:
        """Map domain entity → ORM model (for creation)."""
        return RecordModel(date=entity.date, data=entity.data)

    async def create(self, record: Record) -> Record:
        model = self._to_model(record)
        try:
            self._session.add(model)
            await self._session.flush()
            # created_at is a server default; load it before committing
            await self._session.refresh(model)
            await self._session.commit()
        except SQLAlchemyError as e:
            await self._rollback()
            raise StorageError("create record", str(e)) from e
        return self._to_entity(model)

    async def get_by_date(self, day: date) -> list[Record]:
        stmt = select(RecordModel).where(RecordModel.date == day).order_by(RecordModel.id)
        try:
            result = await self._session.execute(stmt)
            rows = result.scalars().all()
        except (SQLAlchemyError, ValueError) as e:
            # ValueError covers a stored blob the JSON decoder rejects
            await self._rollback()
            raise StorageError("get records by date", str(e)) from e
        return [self._to_entity(row) for row in rows]
