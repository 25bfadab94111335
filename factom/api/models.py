"""Result shapes shared by several API modules."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FactomModel(BaseModel):
    """Base for result models; wire keys may be given by alias or field name."""

    model_config = ConfigDict(populate_by_name=True)


class Key(FactomModel):
    """identity-key, address and generate-* results."""
    public: str = ""
    secret: str = ""


class RpcCall(FactomModel):
    """A ready-to-send request returned by the wallet's compose-* methods."""
    jsonrpc: str = ""
    id: int = 0
    method: str = ""
    params: dict[str, Any] = Field(default_factory=dict)


class Compose(FactomModel):
    """compose-chain, compose-entry and compose-id-* results: commit then reveal."""
    commit: RpcCall = Field(default_factory=RpcCall)
    reveal: RpcCall = Field(default_factory=RpcCall)
