"""On-chain datum shapes for project outputs (Plutus data).

Every shape is a `pycardano.PlutusData` dataclass; `CONSTR_ID` is the
Plutus constructor index. Sum types are `Union`s of constructors and are
resolved by constructor index while parsing.

- Structs (`ProjectId`, `Time`, `Cid`) are single-constructor `Constr 0`.
- `Bool` is `Constr 0` (False) / `Constr 1` (True).
- `Maybe` is `Constr 0 [x]` (Just) / `Constr 1 []` (Nothing).
"""

from dataclasses import dataclass
from typing import Union

from pycardano import PlutusData

# ---------- primitives ----------


@dataclass
class PlutusFalse(PlutusData):
    CONSTR_ID = 0


@dataclass
class PlutusTrue(PlutusData):
    CONSTR_ID = 1


PlutusBool = Union[PlutusFalse, PlutusTrue]


@dataclass
class Nothing(PlutusData):
    CONSTR_ID = 1


@dataclass
class ProjectId(PlutusData):
    CONSTR_ID = 0
    id: bytes


@dataclass
class Time(PlutusData):
    """POSIX time in milliseconds."""

    CONSTR_ID = 0
    timestamp: int


@dataclass
class Cid(PlutusData):
    """IPFS content id, utf-8 encoded."""

    CONSTR_ID = 0
    cid: bytes


@dataclass
class JustCid(PlutusData):
    CONSTR_ID = 0
    value: Cid


# ---------- address ----------


@dataclass
class PubKeyCredential(PlutusData):
    CONSTR_ID = 0
    key_hash: bytes


@dataclass
class ScriptCredential(PlutusData):
    CONSTR_ID = 1
    script_hash: bytes


Credential = Union[PubKeyCredential, ScriptCredential]


@dataclass
class StakingHash(PlutusData):
    CONSTR_ID = 0
    credential: Credential


@dataclass
class StakingPtr(PlutusData):
    CONSTR_ID = 1
    slot: int
    tx_index: int
    cert_index: int


@dataclass
class JustStakingCredential(PlutusData):
    CONSTR_ID = 0
    value: Union[StakingHash, StakingPtr]


@dataclass
class PlutusAddress(PlutusData):
    CONSTR_ID = 0
    payment_credential: Credential
    staking_credential: Union[JustStakingCredential, Nothing]


# ---------- project status ----------


@dataclass
class StatusActive(PlutusData):
    CONSTR_ID = 0


@dataclass
class StatusPreClosed(PlutusData):
    CONSTR_ID = 1
    pending_until: Time


@dataclass
class StatusPreDelisted(PlutusData):
    CONSTR_ID = 2
    pending_until: Time


@dataclass
class StatusClosed(PlutusData):
    CONSTR_ID = 3
    closed_at: Time


@dataclass
class StatusDelisted(PlutusData):
    CONSTR_ID = 4
    delisted_at: Time


ProjectStatusDatum = Union[
    StatusActive, StatusPreClosed, StatusPreDelisted, StatusClosed, StatusDelisted
]


# ---------- project ----------


@dataclass
class ProjectDatum(PlutusData):
    CONSTR_ID = 0
    project_id: ProjectId
    owner_address: PlutusAddress
    status: ProjectStatusDatum
    milestone_reached: int
    is_staking_delegation_managed_by_protocol: PlutusBool


# ---------- project detail ----------


@dataclass
class Sponsorship(PlutusData):
    CONSTR_ID = 0
    amount: int
    until: Time


@dataclass
class JustSponsorship(PlutusData):
    CONSTR_ID = 0
    value: Sponsorship


@dataclass
class ProjectDetailDatum(PlutusData):
    CONSTR_ID = 0
    project_id: ProjectId
    withdrawn_funds: int
    sponsorship: Union[JustSponsorship, Nothing]
    information_cid: Cid
    last_announcement_cid: Union[JustCid, Nothing]


# ---------- project script ----------


@dataclass
class ProjectScriptDatum(PlutusData):
    CONSTR_ID = 0
    project_id: ProjectId
    staking_key_deposit: int
