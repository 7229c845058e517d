"""Exception hierarchy for the POEditor client.

Every error raised by the library derives from :class:`POEditorError` so callers can catch
the whole family at once. The subclasses separate network failures, undecodable payloads,
failures reported by the service itself, and arguments rejected before any request is sent.
"""

from __future__ import annotations

from typing import Any

__all__: list[str] = [
    "APIError",
    "CodecError",
    "ExportDownloadError",
    "POEditorError",
    "TransportError",
    "TransportTimeoutError",
    "ValidationError",
]


class POEditorError(Exception):
    """Base class for all POEditor client errors."""


class TransportError(POEditorError):
    """The request could not be delivered or the response could not be read.

    Args:
        msg (str | BaseException): Description of the failure.
        status (int | None): HTTP status code when the server answered with an error status.
    """

    def __init__(self, msg: str | BaseException, **kwargs: Any) -> None:
        self.msg: str = str(msg)
        self.status: int | None = kwargs.pop("status", None)
        if self.status is not None:
            self.msg = f"{self.msg}: status='{self.status}'"
        super().__init__(self.msg)


class TransportTimeoutError(TransportError):
    """The server did not answer within the configured timeout."""


class ExportDownloadError(TransportError):
    """The export URL was issued but downloading the file failed.

    The sink may already hold part of the file when this is raised.
    """


class CodecError(POEditorError):
    """A response body, envelope field or payload value could not be decoded."""


class ValidationError(POEditorError):
    """Arguments were rejected locally; no request has been sent."""


class APIError(POEditorError):
    """The service reported a failure in its response envelope.

    Attributes:
        status (str): Envelope status, usually ``"fail"``.
        code (str): Envelope code as sent by the service.
        message (str): Human readable message from the service.
    """

    def __init__(self, status: str, code: str, message: str) -> None:
        self.status: str = status
        self.code: str = code
        self.message: str = message
        super().__init__(f"{status} {code}: {message}")

    def __repr__(self) -> str:
        return f"APIError(status={self.status!r}, code={self.code!r}, message={self.message!r})"
