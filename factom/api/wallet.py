"""Wallet, address and compose methods served by factom-walletd."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from factom.api.models import Compose, FactomModel, Key
from factom.client import Factom, parse, walletd_call
from factom.envelope import ApiResponse


class WalletHeight(FactomModel):
    height: int = 0


class WalletProperties(FactomModel):
    walletversion: str = ""
    walletapiversion: str = ""


class SignData(FactomModel):
    """Both values are base64 encoded."""
    pubkey: str = ""
    signature: str = ""


class Addresses(FactomModel):
    addresses: list[Key] | None = Field(default_factory=list)


class RemoveAddress(FactomModel):
    success: bool = False


class WalletBackup(FactomModel):
    wallet_seed: str = Field(default="", alias="wallet-seed")
    addresses: list[Key] | None = Field(default_factory=list)
    identity_keys: list[Key] | None = Field(default_factory=list, alias="identity-keys")


class AccountBalances(FactomModel):
    ack: int = 0
    saved: int = 0


class WalletBalances(FactomModel):
    fctaccountbalances: AccountBalances = Field(default_factory=AccountBalances)
    ecaccountbalances: AccountBalances = Field(default_factory=AccountBalances)


class UnlockWallet(FactomModel):
    success: bool = False
    unlockeduntil: int = 0


async def wallet_height(api: Factom) -> ApiResponse[WalletHeight]:
    """Height of the blocks the wallet has cached while syncing."""
    envelope = await walletd_call(api, "get-height")
    return parse(envelope, WalletHeight)


async def wallet_properties(api: Factom) -> ApiResponse[WalletProperties]:
    """factom-walletd version and API version."""
    envelope = await walletd_call(api, "properties")
    return parse(envelope, WalletProperties)


async def sign_data(api: Factom, signer: str, data: str) -> ApiResponse[SignData]:
    """
    Sign arbitrary data with an ed25519 key held by the wallet.

    ``signer`` is an FA address, an EC address or an idpub identity key;
    ``data`` is base64 encoded. For large payloads sign a hash of the data
    instead. The wallet must be unlocked.
    """
    envelope = await walletd_call(api, "sign-data", {"signer": signer, "data": data})
    return parse(envelope, SignData)


async def address(api: Factom, address: str) -> ApiResponse[Key]:
    """Public and secret key of an address stored in the wallet."""
    envelope = await walletd_call(api, "address", {"address": address})
    return parse(envelope, Key)


async def all_addresses(api: Factom) -> ApiResponse[Addresses]:
    envelope = await walletd_call(api, "all-addresses")
    return parse(envelope, Addresses)


async def generate_ec_address(api: Factom) -> ApiResponse[Key]:
    envelope = await walletd_call(api, "generate-ec-address")
    return parse(envelope, Key)


async def generate_factoid_address(api: Factom) -> ApiResponse[Key]:
    envelope = await walletd_call(api, "generate-factoid-address")
    return parse(envelope, Key)


async def import_addresses(api: Factom, secrets: list[str]) -> ApiResponse[Addresses]:
    """Import Fs/Es secret addresses."""
    params = {"addresses": [{"secret": secret} for secret in secrets]}
    envelope = await walletd_call(api, "import-addresses", params)
    return parse(envelope, Addresses)


async def import_koinify(api: Factom, words: str) -> ApiResponse[Key]:
    """Import the factoid address behind a 12 word Koinify sale phrase."""
    envelope = await walletd_call(api, "import-koinify", {"words": words})
    return parse(envelope, Key)


async def remove_address(api: Factom, address: str) -> ApiResponse[RemoveAddress]:
    """Delete an address from the wallet. Back it up first."""
    envelope = await walletd_call(api, "remove-address", {"address": address})
    return parse(envelope, RemoveAddress)


async def wallet_backup(api: Factom) -> ApiResponse[WalletBackup]:
    """Wallet seed and every stored key. Handle the result as a secret."""
    envelope = await walletd_call(api, "wallet-backup")
    return parse(envelope, WalletBackup)


async def wallet_balances(api: Factom) -> ApiResponse[WalletBalances]:
    """Summed factoid and entry credit balances of all wallet addresses."""
    envelope = await walletd_call(api, "wallet-balances")
    return parse(envelope, WalletBalances)


async def unlock_wallet(api: Factom, passphrase: str, timeout: int) -> ApiResponse[UnlockWallet]:
    """Unlock an encrypted wallet for ``timeout`` seconds."""
    envelope = await walletd_call(api, "unlock-wallet", {"passphrase": passphrase, "timeout": timeout})
    return parse(envelope, UnlockWallet)


async def compose_chain(
    api: Factom,
    extids: list[str],
    content: str,
    ecpub: str,
    force: bool | None = None,
) -> ApiResponse[Compose]:
    """
    commit-chain and reveal-chain calls for a new chain.

    ``extids`` and ``content`` are hex encoded and make up the first entry.
    ``ecpub`` pays for the commit.
    """
    params: dict[str, Any] = {
        "chain": {"firstentry": {"extids": list(extids), "content": content}},
        "ecpub": ecpub,
    }
    if force is not None:
        params["force"] = force
    envelope = await walletd_call(api, "compose-chain", params)
    return parse(envelope, Compose)


async def compose_entry(
    api: Factom,
    chainid: str,
    extids: list[str],
    content: str,
    ecpub: str,
    force: bool | None = None,
) -> ApiResponse[Compose]:
    """commit-entry and reveal-entry calls for a new entry in ``chainid``."""
    params: dict[str, Any] = {
        "entry": {"chainid": chainid, "extids": list(extids), "content": content},
        "ecpub": ecpub,
    }
    if force is not None:
        params["force"] = force
    envelope = await walletd_call(api, "compose-entry", params)
    return parse(envelope, Compose)
