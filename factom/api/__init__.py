"""Typed wrappers for every factomd and factom-walletd method, grouped by domain."""

from factom.api import balance, chain, entry, identity, tx, wallet
from factom.api.models import Compose, FactomModel, Key, RpcCall
from factom.api.tx import SearchBy, SearchByAddress, SearchByRange, SearchByTxid, SearchFilter

__all__ = [
    "balance",
    "chain",
    "entry",
    "identity",
    "tx",
    "wallet",
    "Compose",
    "FactomModel",
    "Key",
    "RpcCall",
    "SearchBy",
    "SearchByAddress",
    "SearchByRange",
    "SearchByTxid",
    "SearchFilter",
]
