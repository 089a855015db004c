"""Top-level API router — POST /records and GET /records, nothing else."""

from fastapi import APIRouter

from records_api.presentation.api.endpoints.records import router as records_router

router = APIRouter()
router.include_router(records_router)
