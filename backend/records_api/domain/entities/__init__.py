from .record import Record, parse_record_date

__all__ = [
    "Record",
    "parse_record_date",
]
