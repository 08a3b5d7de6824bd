"""Core data models for the project indexer.

This module defines:
- `ChainOutput` / `ChainTransaction`: minimal transaction view handed over
  by the chain-sync driver.
- `ChainProject`, `ChainProjectDetail`, `ChainProjectScript`: decoded
  snapshots persisted one row per carrying output.
- `Decoded` / `StoredRow`: a record paired with its batch-local dedup key,
  and a record paired with its output surrogate id once stored.
- Event types produced by the classifier.

Design notes
------------
- Times are Plutus POSIX milliseconds kept as plain ints.
- Amounts are lovelace ints (arbitrary precision).
- The dedup key and the output id are separate fields on separate
  wrappers; a record never carries either.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

# === Transaction view ===


@dataclass(slots=True, frozen=True)
class ChainOutput:
    """One transaction output as seen by decoders."""

    id: int  # surrogate id assigned by the output storage layer
    tx_id: str  # hex
    index: int
    assets: dict[str, int] | None = None  # unit -> quantity
    datum: bytes | None = None  # inline datum CBOR
    script_hash: str | None = None  # reference script hash (hex)

    def pretty_out_ref(self) -> str:
        """Return the `<tx_id>#<index>` output reference."""
        return f"{self.tx_id}#{self.index}"


@dataclass(slots=True, frozen=True)
class ChainTransaction:
    """Transaction body: ordered outputs plus minted/burned deltas."""

    id: str
    outputs: tuple[ChainOutput, ...] = ()
    mint: dict[str, int] = field(default_factory=dict)


# === Persisted records ===


class ProjectStatus(str, Enum):
    ACTIVE = "active"
    PRE_CLOSED = "pre-closed"
    PRE_DELISTED = "pre-delisted"
    CLOSED = "closed"
    DELISTED = "delisted"


@dataclass(slots=True, frozen=True)
class ChainProject:
    project_id: str
    owner_address: str
    status: ProjectStatus
    status_time: int | None
    milestone_reached: int
    is_staking_delegation_managed_by_protocol: bool


@dataclass(slots=True, frozen=True)
class ChainProjectDetail:
    project_id: str
    withdrawn_funds: int
    sponsorship_amount: int | None
    sponsorship_until: int | None
    information_cid: str
    last_announcement_cid: str | None


@dataclass(slots=True, frozen=True)
class ChainProjectScript:
    project_id: str
    staking_key_deposit: int
    staking_script_hash: str


R = TypeVar("R")


@dataclass(slots=True, frozen=True)
class Decoded(Generic[R]):
    """Decoder result: dedup key (`<kind>:<project_id>`) and the record."""

    key: str
    record: R


@dataclass(slots=True, frozen=True)
class StoredRow(Generic[R]):
    """A record bound to the surrogate id of the output that carried it."""

    output_id: int
    record: R


# === Classifier events ===


@dataclass(slots=True, frozen=True)
class ProjectEvent:
    indices: tuple[int, ...]


@dataclass(slots=True, frozen=True)
class ProjectDetailEvent:
    indices: tuple[int, ...]


@dataclass(slots=True, frozen=True)
class ProjectScriptEvent:
    indices: tuple[int, ...]


@dataclass(slots=True, frozen=True)
class ProjectScriptCeasedEvent:
    """At least one project script token was burned in the transaction."""


Event = ProjectEvent | ProjectDetailEvent | ProjectScriptEvent | ProjectScriptCeasedEvent
