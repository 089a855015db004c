from .record import RecordCreate, RecordResponse

__all__ = [
    "RecordCreate",
    "RecordResponse",
]
