"""Decoding utilities: Plutus address reconstruction and primitive helpers."""

from __future__ import annotations

from pycardano import Address, Network, PointerAddress, ScriptHash, VerificationKeyHash

from .datums import (
    Cid,
    Credential,
    JustStakingCredential,
    PlutusAddress,
    PlutusBool,
    PlutusTrue,
    PubKeyCredential,
    StakingHash,
    StakingPtr,
)


def _credential_part(credential: Credential) -> VerificationKeyHash | ScriptHash:
    match credential:
        case PubKeyCredential(key_hash=h):
            return VerificationKeyHash(h)
        case _:
            return ScriptHash(credential.script_hash)


def deconstruct_address(address: PlutusAddress, network: Network) -> str:
    """Return the bech32 form of an on-chain (Plutus) address."""
    staking_part: VerificationKeyHash | ScriptHash | PointerAddress | None = None
    if isinstance(address.staking_credential, JustStakingCredential):
        match address.staking_credential.value:
            case StakingHash(credential=c):
                staking_part = _credential_part(c)
            case StakingPtr(slot=slot, tx_index=tx_index, cert_index=cert_index):
                staking_part = PointerAddress(slot, tx_index, cert_index)
    return Address(
        payment_part=_credential_part(address.payment_credential),
        staking_part=staking_part,
        network=network,
    ).encode()


def cid_text(cid: Cid) -> str:
    return cid.cid.decode("utf-8")


def plutus_bool(value: PlutusBool) -> bool:
    return isinstance(value, PlutusTrue)
