"""Exceptions raised when talking to collaborator services."""


class EventDirectoryError(Exception):
    """Base error for Event Directory calls."""


class MalformedPayloadError(EventDirectoryError):
    """The Event Directory answered 2xx but the body was not a JSON array."""

    def __init__(self, endpoint: str, payload_type: str) -> None:
        super().__init__(f"Expected JSON array from {endpoint}, got {payload_type}")
        self.endpoint = endpoint
        self.payload_type = payload_type
