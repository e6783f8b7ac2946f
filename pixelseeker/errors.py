# Role: Error taxonomy for upstream calls and the conversation guard.
# Clients raise the kind-specific errors internally and surface them as CatalogError / DialogueError;
# empty result sets are NOT errors and never appear here.

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    NETWORK = "network"
    HTTP_STATUS = "http_status"
    MALFORMED_RESPONSE = "malformed_response"
    CONFIGURATION = "configuration"


class PixelSeekerError(Exception):
    pass


class UpstreamError(PixelSeekerError):
    kind: ErrorKind = ErrorKind.NETWORK

    def __init__(self, message: str, *, kind: Optional[ErrorKind] = None, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        if kind is not None:
            self.kind = kind
        self.status_code = status_code

    def __str__(self) -> str:
        base = super().__str__()
        if self.status_code is not None:
            return f"{base} (status={self.status_code})"
        return base


class NetworkError(UpstreamError):
    kind = ErrorKind.NETWORK


class HTTPStatusError(UpstreamError):
    kind = ErrorKind.HTTP_STATUS

    def __init__(self, message: str, *, status_code: int) -> None:
        super().__init__(message, status_code=status_code)


class MalformedResponseError(UpstreamError):
    kind = ErrorKind.MALFORMED_RESPONSE


class CatalogError(UpstreamError):
    """Game catalog search failed. `kind` tells why."""

    @classmethod
    def wrap(cls, err: UpstreamError) -> "CatalogError":
        return cls(f"Catalog search failed: {err}", kind=err.kind, status_code=err.status_code)


class DialogueError(UpstreamError):
    """Dialogue completion failed. `kind` tells why."""

    @classmethod
    def wrap(cls, err: UpstreamError) -> "DialogueError":
        return cls(f"Dialogue completion failed: {err}", kind=err.kind, status_code=err.status_code)


class ConversationBusyError(PixelSeekerError):
    """A message was submitted while the previous one is still pending."""
