"""Application service (use case) for Record operations."""

import asyncio
import logging

from records_api.application.interfaces import RecordRepository
from records_api.application.schemas.record import RecordCreate
from records_api.domain.entities import Record, parse_record_date
from records_api.domain.exceptions import StorageError

logger = logging.getLogger(__name__)


class RecordService:
    """Orchestrates record create/query logic. Depends on the repository port (DI).

    Every repository call is bounded by ``timeout`` seconds; an expired call
    is cancelled and surfaces as a ``StorageError``.
    """

    def __init__(self, repository: RecordRepository, timeout: float | None = None):
        self._repository = repository
        self._timeout = timeout

    async def create_record(self, data: RecordCreate) -> Record:
        record = Record(date=data.date, data=data.data)
        try:
            async with asyncio.timeout(self._timeout):
                created = await self._repository.create(record)
        except TimeoutError:
            raise StorageError("create record", f"timed out after {self._timeout}s") from None
        logger.debug("Created record id=%s date=%s", created.id, created.date)
        return created

    async def list_records_by_date(self, raw_date: str | None) -> list[Record]:
        """Return the records filed under ``raw_date``.

        The query value is parsed here rather than passed through to SQL, so a
        missing or malformed date raises ``InvalidRecordDateError`` (HTTP 400)
        instead of surfacing as a storage failure.
        """
        day = parse_record_date(raw_date)
        try:
            async with asyncio.timeout(self._timeout):
                return await self._repository.get_by_date(day)
        except TimeoutError:
            raise StorageError("get records by date", f"timed out after {self._timeout}s") from None
