"""Balance and rate queries served by factomd."""

from __future__ import annotations

from pydantic import Field

from factom.api.models import FactomModel
from factom.client import Factom, factomd_call, parse
from factom.envelope import ApiResponse


class Balance(FactomModel):
    balance: int = 0


class EntryCreditRate(FactomModel):
    rate: int = 0


class AddressBalance(FactomModel):
    ack: int = 0
    saved: int = 0
    err: str = ""


class MultipleBalances(FactomModel):
    currentheight: int = 0
    lastsavedheight: int = 0
    balances: list[AddressBalance] = Field(default_factory=list)


async def entry_credit_balance(api: Factom, address: str) -> ApiResponse[Balance]:
    """Entry credit balance of a public EC address."""
    envelope = await factomd_call(api, "entry-credit-balance", {"address": address})
    return parse(envelope, Balance)


async def factoid_balance(api: Factom, address: str) -> ApiResponse[Balance]:
    """Factoshi balance of a public FA address."""
    envelope = await factomd_call(api, "factoid-balance", {"address": address})
    return parse(envelope, Balance)


async def entry_credit_rate(api: Factom) -> ApiResponse[EntryCreditRate]:
    """Factoshis needed to buy one entry credit."""
    envelope = await factomd_call(api, "entry-credit-rate")
    return parse(envelope, EntryCreditRate)


async def multiple_ec_balances(api: Factom, addresses: list[str]) -> ApiResponse[MultipleBalances]:
    """
    Acknowledged and saved balances for several EC addresses at once.

    Balances come back in the order the addresses were given; an address that
    could not be read carries a non-empty ``err``.
    """
    envelope = await factomd_call(api, "multiple-ec-balances", {"addresses": list(addresses)})
    return parse(envelope, MultipleBalances)


async def multiple_fct_balances(api: Factom, addresses: list[str]) -> ApiResponse[MultipleBalances]:
    """Acknowledged and saved balances for several FA addresses at once."""
    envelope = await factomd_call(api, "multiple-fct-balances", {"addresses": list(addresses)})
    return parse(envelope, MultipleBalances)
