"""Record endpoints — create and query-by-date."""

import logging

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import PlainTextResponse

from records_api.application.schemas.record import RecordCreate, RecordResponse
from records_api.application.services import RecordService
from records_api.domain.exceptions import InvalidRecordDateError, StorageError
from records_api.infrastructure.dependencies import get_record_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/records", tags=["Records"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses={500: {"description": "Storage failure; body is the error text"}},
)
async def create_record(
    data: RecordCreate,
    service: RecordService = Depends(get_record_service),
) -> Response:
    """Store a new record. Responds 201 with an empty body."""
    try:
        await service.create_record(data)
    except StorageError as e:
        logger.exception("Failed to create record for %s", data.date)
        return PlainTextResponse(str(e), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return Response(status_code=status.HTTP_201_CREATED)


@router.get(
    "",
    response_model=list[RecordResponse],
    responses={
        400: {"description": "Missing or malformed date"},
        500: {"description": "Storage failure; body is the error text"},
    },
)
async def get_records_by_date(
    date: str | None = Query(None, description="Calendar date, YYYY-MM-DD"),
    service: RecordService = Depends(get_record_service),
) -> list[RecordResponse] | Response:
    """Return every record filed under ``date``; an empty list when none match."""
    try:
        records = await service.list_records_by_date(date)
    except InvalidRecordDateError as e:
        return PlainTextResponse(str(e), status_code=status.HTTP_400_BAD_REQUEST)
    except StorageError as e:
        logger.exception("Failed to load records for %s", date)
        return PlainTextResponse(str(e), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return [RecordResponse.model_validate(r, from_attributes=True) for r in records]
