"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class RecordValidationError(DomainException):
    """A source record is missing a required field or holds an invalid value"""

    def __init__(self, message: str, source_type: str = "unknown", source_id: str | None = None):
        super().__init__(message)
        self.source_type = source_type
        self.source_id = source_id


class InvalidWindowError(DomainException):
    """Requested timeline window ends before it starts"""

    pass


class DataStoreError(DomainException):
    """Payment records could not be loaded from the data store"""

    pass
