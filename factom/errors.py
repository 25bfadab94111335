"""
Exception hierarchy for the Factom client.

Provides:
- FactomError base class with a string error code and details
- TransportError / SerializationError / DeserializationError for calls that fail
- ApplicationError for callers that prefer raising on daemon-side errors
"""

from __future__ import annotations

from typing import Any


class FactomError(Exception):
    """Base exception for all factom client errors."""

    def __init__(
        self,
        message: str,
        code: str = "FACTOM_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class TransportError(FactomError):
    """The HTTP exchange failed before a response body was read."""

    def __init__(self, message: str, uri: str | None = None):
        details = {"uri": uri} if uri else {}
        super().__init__(message, code="TRANSPORT_ERROR", details=details)
        self.uri = uri


class SerializationError(FactomError):
    """A request could not be encoded as JSON."""

    def __init__(self, message: str, method: str | None = None):
        details = {"method": method} if method else {}
        super().__init__(message, code="SERIALIZATION_ERROR", details=details)


class DeserializationError(FactomError):
    """A response body was not a well-formed JSON-RPC envelope."""

    def __init__(self, message: str, body: bytes | None = None):
        details: dict[str, Any] = {}
        if body is not None:
            details["body"] = body[:200].decode("utf-8", errors="replace")
        super().__init__(message, code="DESERIALIZATION_ERROR", details=details)


class ApplicationError(FactomError):
    """The daemon answered with a JSON-RPC error object."""

    def __init__(self, rpc_code: int, rpc_message: str, data: Any = None):
        super().__init__(
            f"RPC error {rpc_code}: {rpc_message}",
            code="APPLICATION_ERROR",
            details={"rpc_code": rpc_code, "rpc_message": rpc_message, "data": data},
        )
        self.rpc_code = rpc_code
        self.rpc_message = rpc_message
        self.data = data
