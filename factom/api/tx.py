"""Factoid transaction methods.

``ack``, ``factoid_submit``, ``transaction`` and ``pending_transactions`` go
to factomd. Building, signing and searching transactions goes to
factom-walletd, which keys working transactions by ``tx-name``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from pydantic import Field

from factom.api.models import FactomModel, RpcCall
from factom.client import Factom, factomd_call, parse, walletd_call
from factom.envelope import ApiResponse


@dataclass(frozen=True)
class SearchByTxid:
    """Fastest lookup; the reported height is always 0."""
    txid: str

    def params(self) -> dict[str, Any]:
        return {"txid": self.txid}


@dataclass(frozen=True)
class SearchByAddress:
    """Every transaction involving an address."""
    address: str

    def params(self) -> dict[str, Any]:
        return {"address": self.address}


@dataclass(frozen=True)
class SearchByRange:
    """Every transaction within a block height range."""
    start: int
    end: int

    def params(self) -> dict[str, Any]:
        return {"range": {"start": self.start, "end": self.end}}


SearchFilter = Union[SearchByTxid, SearchByAddress, SearchByRange]


class SearchBy:
    """Constructors for the ``transactions`` search filter."""

    @staticmethod
    def txid(txid: str) -> SearchByTxid:
        return SearchByTxid(txid)

    @staticmethod
    def address(address: str) -> SearchByAddress:
        return SearchByAddress(address)

    @staticmethod
    def range(start: int, end: int) -> SearchByRange:
        return SearchByRange(start, end)


class Input(FactomModel):
    amount: int = 0
    address: str = ""
    useraddress: str = ""


class Output(FactomModel):
    amount: int = 0
    address: str = ""
    useraddress: str = ""


class Sigblock(FactomModel):
    signatures: list[str] = Field(default_factory=list)


class FactoidTransaction(FactomModel):
    millitimestamp: int = 0
    inputs: list[Input] | None = Field(default_factory=list)
    outputs: list[Output] | None = Field(default_factory=list)
    outecs: list[Any] | None = Field(default_factory=list)
    rcds: list[str] | None = Field(default_factory=list)
    sigblocks: list[Sigblock] | None = Field(default_factory=list)
    blockheight: int = 0


class Transaction(FactomModel):
    """transaction result. ``includedindirectoryblockheight`` is -1 for unknown hashes."""
    factoidtransaction: FactoidTransaction = Field(default_factory=FactoidTransaction)
    includedintransactionblock: str = ""
    includedindirectoryblock: str = ""
    includedindirectoryblockheight: int = 0


class FctSubmit(FactomModel):
    message: str = ""
    txid: str = ""


class PendingTransaction(FactomModel):
    """One item of pending-transactions. factomd capitalizes these keys."""
    transactionid: str = Field(default="", alias="TransactionID")
    status: str = Field(default="", alias="Status")
    inputs: list[Input] | None = Field(default_factory=list, alias="Inputs")
    outputs: list[Output] | None = Field(default_factory=list, alias="Outputs")
    ecoutputs: list[Output] | None = Field(default_factory=list, alias="ECOutputs")
    fees: int = Field(default=0, alias="Fees")


class AckStatus(FactomModel):
    status: str = ""
    transactiondate: int = 0
    transactiondatestring: str = ""
    blockdate: int = 0
    blockdatestring: str = ""


class Ack(FactomModel):
    """
    ack result.

    Entry acks fill ``committxid``/``entryhash`` and the two status blocks;
    factoid acks fill ``txid`` and the top level status fields.
    """
    committxid: str = ""
    entryhash: str = ""
    commitdata: AckStatus = Field(default_factory=AckStatus)
    entrydata: AckStatus = Field(default_factory=AckStatus)
    txid: str = ""
    transactiondate: int = 0
    transactiondatestring: str = ""
    blockdate: int = 0
    blockdatestring: str = ""
    status: str = ""


class TxInput(FactomModel):
    address: str = ""
    amount: int = 0


class TxOutput(FactomModel):
    address: str = ""
    amount: int = 0


class Tx(FactomModel):
    """A working transaction held by the wallet."""
    feespaid: int = 0
    feesrequired: int = 0
    signed: bool = False
    name: str = ""
    timestamp: int = 0
    totalecoutputs: int = 0
    totalinputs: int = 0
    totaloutputs: int = 0
    inputs: list[TxInput] | None = Field(default_factory=list)
    outputs: list[TxOutput] | None = Field(default_factory=list)
    ecoutputs: list[TxOutput] | None = Field(default_factory=list)
    txid: str = ""


class TmpTransaction(FactomModel):
    tx_name: str = Field(default="", alias="tx-name")
    txid: str = ""
    totalinputs: int = 0
    totaloutputs: int = 0
    totalecoutputs: int = 0


class TmpTransactions(FactomModel):
    transactions: list[TmpTransaction] | None = Field(default_factory=list)


class Txs(FactomModel):
    """One transaction found by the transactions search."""
    blockheight: int = 0
    feespaid: int = 0
    signed: bool = False
    timestamp: int = 0
    totalecoutputs: int = 0
    totalinputs: int = 0
    totaloutputs: int = 0
    inputs: list[Input] | None = Field(default_factory=list)
    outputs: list[Output] | None = Field(default_factory=list)
    ecoutputs: list[Output] | None = Field(default_factory=list)
    txid: str = ""


class Transactions(FactomModel):
    transactions: list[Txs] | None = Field(default_factory=list)


async def ack(
    api: Factom,
    hash: str,
    chainid: str,
    full_transaction: str | None = None,
) -> ApiResponse[Ack]:
    """
    Status of a factoid transaction, commit or reveal.

    ``chainid`` selects the kind of hash:

    * ``f`` for factoid transactions
    * ``c`` for entry credit transactions (commit entry/chain)
    * the entry's chain id for reveals

    Statuses are "Unknown", "NotConfirmed", "TransactionACK" and
    "DBlockConfirmed". ``full_transaction`` may carry the marshalled
    transaction instead of its hash.
    """
    params: dict[str, Any] = {"hash": hash, "chainid": chainid}
    if full_transaction is not None:
        params["fulltransaction"] = full_transaction
    envelope = await factomd_call(api, "ack", params)
    return parse(envelope, Ack)


async def factoid_submit(api: Factom, transaction: str) -> ApiResponse[FctSubmit]:
    """Submit a hex encoded, signed factoid transaction (see compose_transaction)."""
    envelope = await factomd_call(api, "factoid-submit", {"transaction": transaction})
    return parse(envelope, FctSubmit)


async def transaction(api: Factom, hash: str) -> ApiResponse[Transaction]:
    """
    Details of a factoid transaction by hash or transaction id.

    ``factoidtransaction.blockheight`` is always 0 here; read
    ``includedindirectoryblockheight`` instead.
    """
    envelope = await factomd_call(api, "transaction", {"hash": hash})
    return parse(envelope, Transaction)


async def pending_transactions(
    api: Factom, address: str | None = None
) -> ApiResponse[list[PendingTransaction]]:
    """Factoid transactions known to the network but not yet in a block."""
    params: dict[str, Any] = {}
    if address is not None:
        params["address"] = address
    envelope = await factomd_call(api, "pending-transactions", params)
    return parse(envelope, list[PendingTransaction])


async def add_ec_output(api: Factom, tx_name: str, address: str, amount: int) -> ApiResponse[Tx]:
    """
    Add an entry credit output.

    ``amount`` is in factoshis, not entry credits: multiply the wanted EC by
    the entry-credit-rate.
    """
    params = {"tx-name": tx_name, "address": address, "amount": amount}
    envelope = await walletd_call(api, "add-ec-output", params)
    return parse(envelope, Tx)


async def add_fee(api: Factom, tx_name: str, address: str) -> ApiResponse[Tx]:
    """
    Raise the input from ``address`` by the fee the transaction needs.

    The wallet rejects this with "Inputs and outputs don't add up" when the
    transaction would overpay.
    """
    envelope = await walletd_call(api, "add-fee", {"tx-name": tx_name, "address": address})
    return parse(envelope, Tx)


async def add_input(api: Factom, tx_name: str, address: str, amount: int) -> ApiResponse[Tx]:
    """Add (or overwrite) the input from ``address``, in factoshis."""
    params = {"tx-name": tx_name, "address": address, "amount": amount}
    envelope = await walletd_call(api, "add-input", params)
    return parse(envelope, Tx)


async def add_output(api: Factom, tx_name: str, address: str, amount: int) -> ApiResponse[Tx]:
    """Add a factoid output, in factoshis."""
    params = {"tx-name": tx_name, "address": address, "amount": amount}
    envelope = await walletd_call(api, "add-output", params)
    return parse(envelope, Tx)


async def delete_transaction(api: Factom, tx_name: str) -> ApiResponse[Tx]:
    """Delete a working transaction. The deleted transaction is returned."""
    envelope = await walletd_call(api, "delete-transaction", {"tx-name": tx_name})
    return parse(envelope, Tx)


async def new_transaction(api: Factom, tx_name: str) -> ApiResponse[Tx]:
    """Create a working transaction. Its txid changes until it is signed."""
    envelope = await walletd_call(api, "new-transaction", {"tx-name": tx_name})
    return parse(envelope, Tx)


async def sign_transaction(api: Factom, tx_name: str, force: bool | None = None) -> ApiResponse[Tx]:
    """Sign a working transaction. ``force`` signs even when fees look wrong."""
    params: dict[str, Any] = {"tx-name": tx_name}
    if force is not None:
        params["force"] = force
    envelope = await walletd_call(api, "sign-transaction", params)
    return parse(envelope, Tx)


async def sub_fee(api: Factom, tx_name: str, address: str) -> ApiResponse[Tx]:
    """Deduct the fee from the output paying ``address``."""
    envelope = await walletd_call(api, "sub-fee", {"tx-name": tx_name, "address": address})
    return parse(envelope, Tx)


async def tmp_transactions(api: Factom) -> ApiResponse[TmpTransactions]:
    """Working transactions that have not been sent."""
    envelope = await walletd_call(api, "tmp-transactions")
    return parse(envelope, TmpTransactions)


async def transactions(api: Factom, search: SearchFilter) -> ApiResponse[Transactions]:
    """
    Search transactions by txid, by address or by a block height range.

    ``search`` comes from ``SearchBy.txid``, ``SearchBy.address`` or
    ``SearchBy.range``; exactly one filter is sent.
    """
    if not isinstance(search, (SearchByTxid, SearchByAddress, SearchByRange)):
        raise TypeError(f"unsupported transactions search: {search!r}")
    envelope = await walletd_call(api, "transactions", search.params())
    return parse(envelope, Transactions)


async def compose_transaction(api: Factom, tx_name: str) -> ApiResponse[RpcCall]:
    """Ready-to-send factoid-submit call for a signed working transaction."""
    envelope = await walletd_call(api, "compose-transaction", {"tx-name": tx_name})
    return parse(envelope, RpcCall)
