class RecordError(Exception):
    """Base class for failures raised by record services."""


class RecordNotFoundError(RecordError):
    def __init__(self, message: str, *, record_id: object = None) -> None:
        super().__init__(message)
        self.record_id = record_id


class RecordValidationError(RecordError):
    """The submitted payload failed the ``nombre`` constraints."""
