"""Identity key methods served by factom-walletd.

If the wallet is encrypted it must be unlocked before any of these calls.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from factom.api.models import Compose, FactomModel, Key
from factom.client import Factom, parse, walletd_call
from factom.envelope import ApiResponse


class IdKeys(FactomModel):
    keys: list[Key] | None = Field(default_factory=list)


class ActiveIdKeys(FactomModel):
    chainid: str = ""
    height: int = 0
    keys: list[str] | None = Field(default_factory=list)


class RemoveIdKey(FactomModel):
    success: str = ""


def _with_force(params: dict[str, Any], force: bool | None) -> dict[str, Any]:
    if force is not None:
        params["force"] = force
    return params


async def all_id_keys(api: Factom) -> ApiResponse[IdKeys]:
    """All identity key pairs stored in the wallet."""
    envelope = await walletd_call(api, "all-identity-keys")
    return parse(envelope, IdKeys)


async def active_id_keys(api: Factom, chain_id: str, height: int | None = None) -> ApiResponse[ActiveIdKeys]:
    """
    An identity's public keys, in decreasing priority, active at ``height``.

    Without ``height`` the most recent height is used. Heights are directory
    block heights, which lets a verifier check that a signature was made with
    a key that was valid when the signed entry was published, even if the key
    has since been replaced.
    """
    params: dict[str, Any] = {"chainid": chain_id}
    if height is not None:
        params["height"] = height
    envelope = await walletd_call(api, "active-identity-keys", params)
    return parse(envelope, ActiveIdKeys)


async def remove_id_key(api: Factom, public: str) -> ApiResponse[RemoveIdKey]:
    """
    Delete the identity key pair for ``public`` from the wallet.

    The key pair cannot be recovered from this wallet afterwards; back it up
    first.
    """
    envelope = await walletd_call(api, "remove-identity-key", {"public": public})
    return parse(envelope, RemoveIdKey)


async def id_key(api: Factom, public: str) -> ApiResponse[Key]:
    """The key pair for ``public``; an error if the wallet does not hold it."""
    envelope = await walletd_call(api, "identity-key", {"public": public})
    return parse(envelope, Key)


async def generate_id_key(api: Factom) -> ApiResponse[Key]:
    envelope = await walletd_call(api, "generate-identity-key")
    return parse(envelope, Key)


async def import_id_keys(api: Factom, secrets: list[str]) -> ApiResponse[IdKeys]:
    """Import identity keys given their ``idsec`` secrets."""
    params = {"keys": [{"secret": secret} for secret in secrets]}
    envelope = await walletd_call(api, "import-identity-keys", params)
    return parse(envelope, IdKeys)


async def compose_id_chain(
    api: Factom,
    name: list[str],
    pubkeys: list[str],
    ecpub: str,
    force: bool | None = None,
) -> ApiResponse[Compose]:
    """Commit and reveal calls creating an identity chain named by ``name``."""
    params = _with_force({"name": list(name), "pubkeys": list(pubkeys), "ecpub": ecpub}, force)
    envelope = await walletd_call(api, "compose-id-chain", params)
    return parse(envelope, Compose)


async def compose_id_key_replacement(
    api: Factom,
    chainid: str,
    oldkey: str,
    newkey: str,
    signerkey: str,
    ecpub: str,
    force: bool | None = None,
) -> ApiResponse[Compose]:
    """Replace ``oldkey`` with ``newkey``; ``signerkey`` must be of equal or higher priority."""
    params = _with_force(
        {
            "chainid": chainid,
            "oldkey": oldkey,
            "newkey": newkey,
            "signerkey": signerkey,
            "ecpub": ecpub,
        },
        force,
    )
    envelope = await walletd_call(api, "compose-id-key-replacement", params)
    return parse(envelope, Compose)


async def compose_id_attribute(
    api: Factom,
    receiver_chainid: str,
    destination_chainid: str,
    attributes: list[dict[str, Any]],
    signerkey: str,
    signer_chainid: str,
    ecpub: str,
    force: bool | None = None,
) -> ApiResponse[Compose]:
    """Attach ``attributes`` (``{"key": ..., "value": ...}`` items) to a receiver identity."""
    params = _with_force(
        {
            "receiver-chainid": receiver_chainid,
            "destination-chainid": destination_chainid,
            "attributes": [dict(attribute) for attribute in attributes],
            "signerkey": signerkey,
            "signer-chainid": signer_chainid,
            "ecpub": ecpub,
        },
        force,
    )
    envelope = await walletd_call(api, "compose-id-attribute", params)
    return parse(envelope, Compose)


async def compose_id_attribute_endorsement(
    api: Factom,
    receiver_chainid: str,
    destination_chainid: str,
    entry_hash: str,
    signerkey: str,
    signer_chainid: str,
    ecpub: str,
    force: bool | None = None,
) -> ApiResponse[Compose]:
    """Endorse the attribute entry ``entry_hash``."""
    params = _with_force(
        {
            "receiver-chainid": receiver_chainid,
            "destination-chainid": destination_chainid,
            "entry-hash": entry_hash,
            "signerkey": signerkey,
            "signer-chainid": signer_chainid,
            "ecpub": ecpub,
        },
        force,
    )
    envelope = await walletd_call(api, "compose-id-attribute-endorsement", params)
    return parse(envelope, Compose)
