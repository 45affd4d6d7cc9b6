"""Domain errors."""


class TransferError(Exception):
    """Base class for all errors raised by ptv_transfers."""


class MalformedRecordError(TransferError):
    """A departure record has no usable timestamp."""


class UpstreamUnavailableError(TransferError):
    """The upstream timetable API could not be reached or returned unusable data."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ConfigurationError(TransferError):
    """Required configuration is missing or invalid."""
