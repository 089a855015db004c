"""Domain-specific exceptions — framework-independent."""


class StorageError(Exception):
    """Raised when the record store fails to read or write."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(f"{operation}: {message}")


class InvalidRecordDateError(Exception):
    """Raised when a record date is missing or not a YYYY-MM-DD calendar date."""

    def __init__(self, value: str | None):
        self.value = value
        super().__init__(f"invalid date {value!r}: expected YYYY-MM-DD")
