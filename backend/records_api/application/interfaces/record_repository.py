"""Abstract repository interface (port) for Record persistence."""

from abc import ABC, abstractmethod
from datetime import date

from records_api.domain.entities import Record


class RecordRepository(ABC):
    """Port for record persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def create(self, record: Record) -> Record:
        """Persist a new record and return it with ``id`` and ``created_at`` set."""
        ...

    @abstractmethod
    async def get_by_date(self, day: date) -> list[Record]:
        """Retrieve every record filed under ``day``; empty when none match."""
        ...
