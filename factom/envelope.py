"""JSON-RPC 2.0 envelope codec.

Requests are encoded from a method name plus named params. Responses are
decoded in two phases: ``decode`` turns raw bytes into a method-agnostic
``Envelope``, then ``Envelope.into`` validates the ``result`` payload into the
shape a particular method returns.
"""

from __future__ import annotations

import json
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, ValidationError, model_validator

from factom.errors import ApplicationError, DeserializationError, SerializationError

JSONRPC = "2.0"
ID = 0

T = TypeVar("T")


class ApiRequest(BaseModel):
    """Outbound JSON-RPC request."""

    jsonrpc: str = JSONRPC
    id: int = ID
    method: str
    params: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def new(cls, method: str) -> "ApiRequest":
        return cls(method=method)

    def to_json(self) -> bytes:
        return encode(self.method, self.params)


class ApiError(BaseModel):
    """Error object of a JSON-RPC response. ``code == 0`` means no error."""

    code: int = 0
    message: str = ""
    data: Any = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class ApiResponse(BaseModel, Generic[T]):
    """Typed response: ``result`` on success, ``error`` otherwise."""

    jsonrpc: str = JSONRPC
    id: int | str | None = ID
    result: T | None = None
    error: ApiError = Field(default_factory=ApiError)

    def is_err(self) -> bool:
        """True when the daemon rejected the request. Transport failures raise instead."""
        return self.error.code != 0

    def success(self) -> bool:
        """True when the daemon accepted the request. Transport failures raise instead."""
        return self.error.code == 0

    def raise_for_error(self) -> "ApiResponse[T]":
        """Raise ``ApplicationError`` for an error response, otherwise return self."""
        if self.is_err():
            raise ApplicationError(self.error.code, self.error.message, self.error.data)
        return self


class Envelope(BaseModel):
    """Method-agnostic response envelope holding exactly one outcome."""

    jsonrpc: str
    id: int | str | None
    result: Any = None
    error: ApiError | None = None

    @model_validator(mode="before")
    @classmethod
    def _one_outcome(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            raise ValueError("envelope must be a JSON object")
        error = data.get("error")
        if error is None and "result" not in data:
            raise ValueError("envelope carries neither result nor error")
        # An error object with code 0 (or no code) is not an error.
        failed = isinstance(error, dict) and error.get("code", 0) != 0
        if failed and data.get("result") is not None:
            raise ValueError("envelope carries both result and error")
        return data

    def success(self) -> bool:
        return self.error is None or self.error.code == 0

    def into(self, result_type: Any) -> ApiResponse[Any]:
        """Second decode phase: validate ``result`` as ``result_type``."""
        error = self.error or ApiError()
        result = self.result if self.success() else None
        try:
            return ApiResponse[result_type](
                jsonrpc=self.jsonrpc,
                id=self.id,
                result=result,
                error=error,
            )
        except ValidationError as exc:
            raise DeserializationError(f"unexpected result shape: {exc}") from exc


def encode(method: str, params: dict[str, Any] | None = None) -> bytes:
    """Serialize a request envelope for ``method``."""
    if not method:
        raise SerializationError("method name must not be empty")
    payload = ApiRequest(method=method, params=dict(params or {})).model_dump()
    try:
        return json.dumps(payload, allow_nan=False, separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"cannot encode params for {method}: {exc}", method=method) from exc


def decode(body: bytes) -> Envelope:
    """Parse raw response bytes into an ``Envelope``."""
    try:
        data = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DeserializationError(f"response is not valid JSON: {exc}", body=body) from exc
    try:
        return Envelope.model_validate(data)
    except ValidationError as exc:
        raise DeserializationError(f"malformed JSON-RPC envelope: {exc}", body=body) from exc
