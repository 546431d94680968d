"""
Error Taxonomy

Transport error codes and the typed error raised by HttpRequester.
Defines both a Pydantic model for structured error communication
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """
    Stable numeric transport error codes.

    Numbering follows libcurl's CURLcode values so codes stay comparable
    with curl-based tooling.
    """

    UNSUPPORTED_PROTOCOL = 1
    URL_MALFORMAT = 3
    COULDNT_RESOLVE_PROXY = 5
    COULDNT_RESOLVE_HOST = 6
    COULDNT_CONNECT = 7
    PARTIAL_FILE = 18
    OPERATION_TIMEDOUT = 28
    SSL_CONNECT_ERROR = 35
    TOO_MANY_REDIRECTS = 47
    GOT_NOTHING = 52
    RECV_ERROR = 56
    PEER_FAILED_VERIFICATION = 60
    BAD_CONTENT_ENCODING = 61


_DESCRIPTIONS: dict[int, str] = {
    ErrorCodes.UNSUPPORTED_PROTOCOL: "Unsupported protocol",
    ErrorCodes.URL_MALFORMAT: "URL using bad/illegal format or missing URL",
    ErrorCodes.COULDNT_RESOLVE_PROXY: "Couldn't resolve proxy name",
    ErrorCodes.COULDNT_RESOLVE_HOST: "Couldn't resolve host name",
    ErrorCodes.COULDNT_CONNECT: "Couldn't connect to server",
    ErrorCodes.PARTIAL_FILE: "Transferred a partial file",
    ErrorCodes.OPERATION_TIMEDOUT: "Timeout was reached",
    ErrorCodes.SSL_CONNECT_ERROR: "SSL connect error",
    ErrorCodes.TOO_MANY_REDIRECTS: "Number of redirects hit maximum amount",
    ErrorCodes.GOT_NOTHING: "Server returned nothing (no headers, no data)",
    ErrorCodes.RECV_ERROR: "Failure when receiving data from the peer",
    ErrorCodes.PEER_FAILED_VERIFICATION: "SSL peer certificate or SSH remote key was not OK",
    ErrorCodes.BAD_CONTENT_ENCODING: "Unrecognized or bad HTTP Content or Transfer-Encoding",
}


def describe(code: int) -> str:
    """Human-readable description for a transport error code."""
    return _DESCRIPTIONS.get(code, f"Unknown error ({code})")


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class TransportErrorModel(BaseModel):
    """
    Serializable form of a transport failure.

    Used where an error has to cross a process boundary (CLI JSON output,
    logs shipped elsewhere) instead of being raised.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    code: int = Field(
        ...,
        gt=0,
        description="Transport error code (see ErrorCodes)",
        examples=[ErrorCodes.COULDNT_CONNECT],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the failure",
    )

    def to_exception(self) -> "TransportError":
        """Convert this error model to a raised exception."""
        return TransportError(
            code=self.code,
            message=self.message,
            details=self.details,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class RequesterException(Exception):
    """
    Base exception for requester errors.

    Carries a numeric code alongside the message so callers never have
    to parse the message text.
    """

    def __init__(
        self,
        message: str,
        code: int = 0,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class TransportError(RequesterException):
    """
    Raised when an exchange could not be completed.

    Covers connection, DNS, timeout, TLS and protocol failures. HTTP error
    statuses (4xx/5xx) are never reported this way.
    """

    def __init__(
        self,
        code: int,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        if code <= 0:
            raise ValueError(f"transport error code must be positive, got {code}")
        super().__init__(
            message=message or f"transport error: {describe(code)}",
            code=code,
            details=details,
        )

    @classmethod
    def from_code(cls, code: int, **details: Any) -> "TransportError":
        """Build the error with the standard message for ``code``."""
        return cls(code=code, details=details)

    def to_error_model(self) -> TransportErrorModel:
        """Convert this exception to a TransportErrorModel."""
        return TransportErrorModel(
            code=self.code,
            message=self.message,
            details=self.details,
        )
