"""Entry methods served by factomd."""

from __future__ import annotations

from pydantic import Field

from factom.api.models import FactomModel
from factom.client import Factom, factomd_call, parse
from factom.envelope import ApiResponse


class Entry(FactomModel):
    chainid: str = ""
    content: str = ""
    extids: list[str] = Field(default_factory=list)


class CommitEntry(FactomModel):
    message: str = ""
    txid: str = ""
    entryhash: str = ""


class RawData(FactomModel):
    data: str = ""


class PendingEntry(FactomModel):
    """One item of the pending-entries list."""
    entryhash: str = ""
    chainid: str | None = None
    status: str = ""


class RevealEntry(FactomModel):
    message: str = ""
    entryhash: str = ""
    chainid: str = ""


async def commit_entry(api: Factom, message: str) -> ApiResponse[CommitEntry]:
    """
    Send an Entry Commit Message to factomd to create a new Entry.

    ``message`` is the hex encoded, signed commit. factom-walletd's
    compose-entry builds it, together with the matching reveal-entry call.
    The reveal must be sent after the commit.

    Sending the same commit twice is rejected with a "repeated commit" error;
    this guards against double spending. When that happens skip straight to
    the reveal.
    """
    envelope = await factomd_call(api, "commit-entry", {"message": message})
    return parse(envelope, CommitEntry)


async def entry(api: Factom, hash: str) -> ApiResponse[Entry]:
    """Get an Entry from factomd specified by the Entry Hash."""
    envelope = await factomd_call(api, "entry", {"hash": hash})
    return parse(envelope, Entry)


async def raw_data(api: Factom, hash: str) -> ApiResponse[RawData]:
    """Retrieve an entry or transaction in raw format, as a hex encoded string."""
    envelope = await factomd_call(api, "raw-data", {"hash": hash})
    return parse(envelope, RawData)


async def pending_entries(api: Factom) -> ApiResponse[list[PendingEntry]]:
    """Entries submitted but not yet recorded in the blockchain."""
    envelope = await factomd_call(api, "pending-entries")
    return parse(envelope, list[PendingEntry])


async def reveal_entry(api: Factom, entry: str) -> ApiResponse[RevealEntry]:
    """
    Reveal an Entry to factomd after the Commit to complete the Entry creation.

    ``entry`` is the hex encoded entry. compose-entry on factom-walletd
    produces it alongside the commit.
    """
    envelope = await factomd_call(api, "reveal-entry", {"entry": entry})
    return parse(envelope, RevealEntry)
