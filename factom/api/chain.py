"""Chain, block and node status methods served by factomd."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from factom.api.models import FactomModel
from factom.client import Factom, factomd_call, parse
from factom.envelope import ApiResponse


class CommitChain(FactomModel):
    message: str = ""
    txid: str = ""
    entryhash: str = ""
    chainid: str = ""


class RevealChain(FactomModel):
    message: str = ""
    entryhash: str = ""
    chainid: str = ""


class ChainHead(FactomModel):
    chainhead: str = ""
    chaininprocesslist: bool = False


class EntryBlockHeader(FactomModel):
    blocksequencenumber: int = 0
    chainid: str = ""
    prevkeymr: str = ""
    timestamp: int = 0
    dbheight: int = 0


class EntryBlockItem(FactomModel):
    entryhash: str = ""
    timestamp: int = 0


class EntryBlock(FactomModel):
    header: EntryBlockHeader = Field(default_factory=EntryBlockHeader)
    entrylist: list[EntryBlockItem] = Field(default_factory=list)


class DirectoryBlockHeader(FactomModel):
    prevblockkeymr: str = ""
    sequencenumber: int = 0
    timestamp: int = 0


class DirectoryBlockItem(FactomModel):
    chainid: str = ""
    keymr: str = ""


class DirectoryBlock(FactomModel):
    header: DirectoryBlockHeader = Field(default_factory=DirectoryBlockHeader)
    entryblocklist: list[DirectoryBlockItem] = Field(default_factory=list)


class DirectoryBlockHead(FactomModel):
    keymr: str = ""


class Heights(FactomModel):
    directoryblockheight: int = 0
    leaderheight: int = 0
    entryblockheight: int = 0
    entryheight: int = 0


class CurrentMinute(FactomModel):
    leaderheight: int = 0
    directoryblockheight: int = 0
    minute: int = 0
    currentblockstarttime: int = 0
    currentminutestarttime: int = 0
    currenttime: int = 0
    directoryblockinseconds: int = 0
    stalldetected: bool = False
    faulttimeout: int = 0
    roundtimeout: int = 0


class Properties(FactomModel):
    factomdversion: str = ""
    factomdapiversion: str = ""


class Receipt(FactomModel):
    receipt: dict[str, Any] = Field(default_factory=dict)


class RawMessage(FactomModel):
    message: str = ""


# Block bodies are passed through as decoded JSON; rawdata is the hex encoding.

class AdminBlock(FactomModel):
    ablock: dict[str, Any] = Field(default_factory=dict)
    rawdata: str = ""


class DBlock(FactomModel):
    dblock: dict[str, Any] = Field(default_factory=dict)
    rawdata: str = ""


class ECBlock(FactomModel):
    ecblock: dict[str, Any] = Field(default_factory=dict)
    rawdata: str = ""


class FBlock(FactomModel):
    fblock: dict[str, Any] = Field(default_factory=dict)
    rawdata: str = ""


async def commit_chain(api: Factom, message: str) -> ApiResponse[CommitChain]:
    """
    Send a Chain Commit Message to factomd to create a new Chain.

    As with entries, the commit must be followed by reveal-chain. compose-chain
    on factom-walletd builds both messages.
    """
    envelope = await factomd_call(api, "commit-chain", {"message": message})
    return parse(envelope, CommitChain)


async def reveal_chain(api: Factom, entry: str) -> ApiResponse[RevealChain]:
    """Reveal the first entry of a chain after its commit."""
    envelope = await factomd_call(api, "reveal-chain", {"entry": entry})
    return parse(envelope, RevealChain)


async def chain_head(api: Factom, chainid: str) -> ApiResponse[ChainHead]:
    """Key Merkle Root of the newest entry block of a chain."""
    envelope = await factomd_call(api, "chain-head", {"chainid": chainid})
    return parse(envelope, ChainHead)


async def entry_block(api: Factom, keymr: str) -> ApiResponse[EntryBlock]:
    envelope = await factomd_call(api, "entry-block", {"keymr": keymr})
    return parse(envelope, EntryBlock)


async def directory_block(api: Factom, keymr: str) -> ApiResponse[DirectoryBlock]:
    envelope = await factomd_call(api, "directory-block", {"keymr": keymr})
    return parse(envelope, DirectoryBlock)


async def directory_block_head(api: Factom) -> ApiResponse[DirectoryBlockHead]:
    envelope = await factomd_call(api, "directory-block-head")
    return parse(envelope, DirectoryBlockHead)


async def heights(api: Factom) -> ApiResponse[Heights]:
    """
    Current heights known to factomd.

    ``leaderheight`` is the block being built by the leaders;
    ``directoryblockheight`` is the newest block this node has saved.
    """
    envelope = await factomd_call(api, "heights")
    return parse(envelope, Heights)


async def current_minute(api: Factom) -> ApiResponse[CurrentMinute]:
    envelope = await factomd_call(api, "current-minute")
    return parse(envelope, CurrentMinute)


async def properties(api: Factom) -> ApiResponse[Properties]:
    """factomd version and API version."""
    envelope = await factomd_call(api, "properties")
    return parse(envelope, Properties)


async def receipt(api: Factom, hash: str, include_raw_entry: bool | None = None) -> ApiResponse[Receipt]:
    """Merkle proof that an entry is anchored in a directory block."""
    params: dict[str, Any] = {"hash": hash}
    if include_raw_entry is not None:
        params["includerawentry"] = include_raw_entry
    envelope = await factomd_call(api, "receipt", params)
    return parse(envelope, Receipt)


async def send_raw_message(api: Factom, message: str) -> ApiResponse[RawMessage]:
    """Send a hex encoded, already marshalled message straight into the network."""
    envelope = await factomd_call(api, "send-raw-message", {"message": message})
    return parse(envelope, RawMessage)


async def diagnostics(api: Factom) -> ApiResponse[dict[str, Any]]:
    envelope = await factomd_call(api, "diagnostics")
    return parse(envelope, dict[str, Any])


async def admin_block(api: Factom, keymr: str) -> ApiResponse[AdminBlock]:
    envelope = await factomd_call(api, "admin-block", {"keymr": keymr})
    return parse(envelope, AdminBlock)


async def ablock_by_height(api: Factom, height: int) -> ApiResponse[AdminBlock]:
    envelope = await factomd_call(api, "ablock-by-height", {"height": height})
    return parse(envelope, AdminBlock)


async def dblock_by_height(api: Factom, height: int) -> ApiResponse[DBlock]:
    envelope = await factomd_call(api, "dblock-by-height", {"height": height})
    return parse(envelope, DBlock)


async def ecblock_by_height(api: Factom, height: int) -> ApiResponse[ECBlock]:
    envelope = await factomd_call(api, "ecblock-by-height", {"height": height})
    return parse(envelope, ECBlock)


async def fblock_by_height(api: Factom, height: int) -> ApiResponse[FBlock]:
    envelope = await factomd_call(api, "fblock-by-height", {"height": height})
    return parse(envelope, FBlock)


async def entry_credit_block(api: Factom, keymr: str) -> ApiResponse[ECBlock]:
    envelope = await factomd_call(api, "entrycredit-block", {"keymr": keymr})
    return parse(envelope, ECBlock)


async def factoid_block(api: Factom, keymr: str) -> ApiResponse[FBlock]:
    envelope = await factomd_call(api, "factoid-block", {"keymr": keymr})
    return parse(envelope, FBlock)
