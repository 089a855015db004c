"""Shared fixtures: in-memory fake repository and a throwaway SQLite database."""

import asyncio
from collections.abc import AsyncIterator
from datetime import date, datetime, timezone
from pathlib import Path

import pytest
import pytest_asyncio

from records_api.application.interfaces import RecordRepository
from records_api.domain.entities import Record
from records_api.domain.exceptions import StorageError
from records_api.infrastructure.database import Database


class FakeRecordRepository(RecordRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self._records: list[Record] = []
        self._next_id = 1
        self.fail_with: str | None = None
        self.delay: float = 0.0

    async def create(self, record: Record) -> Record:
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail_with is not None:
            raise StorageError("create record", self.fail_with)
        record.id = self._next_id
        record.created_at = datetime.now(timezone.utc)
        self._next_id += 1
        self._records.append(record)
        return record

    async def get_by_date(self, day: date) -> list[Record]:
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail_with is not None:
            raise StorageError("get records by date", self.fail_with)
        return [r for r in self._records if r.date == day]

    @property
    def records(self) -> list[Record]:
        return list(self._records)


@pytest.fixture
def fake_repository() -> FakeRecordRepository:
    return FakeRecordRepository()


@pytest_asyncio.fixture
async def sqlite_database(tmp_path: Path) -> AsyncIterator[Database]:
    """A connected Database backed by a SQLite file under tmp_path."""
    database = Database(f"sqlite:///{tmp_path / 'records.db'}")
    await database.connect()
    try:
        yield database
    finally:
        await database.dispose()
