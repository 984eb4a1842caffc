"""Dispatch errors - Pure data structures.

Every failure of a webhook send is reported as a DispatchError carrying
a kind tag, so callers can tell a transport failure from a remote
rejection without parsing strings.
"""

from enum import Enum


class ErrorKind(Enum):
    """Category of a dispatch failure."""
    ENCODING = "encoding"
    REQUEST_BUILD = "request_build"
    TRANSPORT = "transport"
    REMOTE_REJECTION = "remote_rejection"


class DispatchError(Exception):
    """Base error for a failed webhook send.

    Attributes:
        kind: Category of the failure
        message: Human-readable description
        cause: Underlying exception, if any
        status_code: HTTP status code (remote rejections only)
        body: Response body text (remote rejections only)
    """

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class EncodingError(DispatchError):
    """The message could not be serialized to JSON."""
    kind = ErrorKind.ENCODING


class RequestBuildError(DispatchError):
    """The HTTP request could not be constructed (e.g. malformed URL)."""
    kind = ErrorKind.REQUEST_BUILD


class TransportError(DispatchError):
    """The network call itself failed (DNS, refused, timeout, TLS)."""
    kind = ErrorKind.TRANSPORT


class RemoteRejectionError(DispatchError):
    """The remote service answered with something other than 204.

    Attributes:
        status_line: Status code and reason, e.g. "400 Bad Request"
        body_read_error: Set when the error body itself could not be read
    """
    kind = ErrorKind.REMOTE_REJECTION

    def __init__(
        self,
        status_code: int,
        status_line: str,
        body: str | None = None,
        body_read_error: BaseException | None = None,
    ) -> None:
        super().__init__(
            "remote rejected webhook",
            cause=body_read_error,
            status_code=status_code,
            body=body,
        )
        self.status_line = status_line
        self.body_read_error = body_read_error

    def __str__(self) -> str:
        if self.body_read_error is not None:
            return (
                f"{self.message}: {self.status_line} "
                f"(could not read error body: {self.body_read_error})"
            )
        return f"{self.message}: {self.status_line}: {self.body}"
