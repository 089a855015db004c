"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from records_api.config import get_settings
from records_api.application.services import RecordService
from records_api.infrastructure.database.session import get_db_session
from records_api.infrastructure.database.repositories import SQLAlchemyRecordRepository


async def get_record_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[RecordService, None]:
    """Provides a RecordService instance with its repository wired up."""
    settings = get_settings()
    repository = SQLAlchemyRecordRepository(session)
    yield RecordService(repository, timeout=settings.request_timeout_seconds)
