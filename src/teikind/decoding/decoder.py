"""Record decoders for project, project detail and project script outputs.

Each decoder turns one `ChainOutput` into a `Decoded` record, or returns
None when a field the record needs is missing from the output. A None is
logged and the caller skips the output; it never aborts the batch.

A datum that is present but malformed raises `DatumDecodeError`: outputs
reach these decoders only when they carry a protocol token, so a bad shape
means the token set or the chain data is wrong and the unit must abort.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from cbor2 import CBORDecodeError
from pycardano import Network, PlutusData
from pycardano.exception import PyCardanoException

from teikind.core.constants import KEY_PROJECT, KEY_PROJECT_DETAIL, KEY_PROJECT_SCRIPT
from teikind.core.errors import DatumDecodeError
from teikind.core.models import (
    ChainOutput,
    ChainProject,
    ChainProjectDetail,
    ChainProjectScript,
    Decoded,
    ProjectStatus,
)
from teikind.decoding.datums import (
    JustCid,
    JustSponsorship,
    ProjectDatum,
    ProjectDetailDatum,
    ProjectScriptDatum,
    ProjectStatusDatum,
    StatusActive,
    StatusClosed,
    StatusDelisted,
    StatusPreClosed,
    StatusPreDelisted,
)
from teikind.decoding.utils import cid_text, deconstruct_address, plutus_bool

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=PlutusData)


# ---------- helper functions ----------


def status_of(status: ProjectStatusDatum) -> tuple[ProjectStatus, int | None]:
    """Map an on-chain status to its literal and status time (if any)."""
    match status:
        case StatusActive():
            return ProjectStatus.ACTIVE, None
        case StatusPreClosed(pending_until=t):
            return ProjectStatus.PRE_CLOSED, t.timestamp
        case StatusPreDelisted(pending_until=t):
            return ProjectStatus.PRE_DELISTED, t.timestamp
        case StatusClosed(closed_at=t):
            return ProjectStatus.CLOSED, t.timestamp
        case StatusDelisted(delisted_at=t):
            return ProjectStatus.DELISTED, t.timestamp
    raise TypeError(f"unsupported project status: {status!r}")


def _has_datum(output: ChainOutput, what: str) -> bool:
    if output.datum is None:
        logger.warning("datum should be available for %s %s", what, output.pretty_out_ref())
        return False
    return True


def _load_datum(datum_cls: type[D], output: ChainOutput, what: str) -> D:
    try:
        return datum_cls.from_cbor(output.datum)
    except (PyCardanoException, CBORDecodeError) as e:
        raise DatumDecodeError(
            f"malformed {what} datum at {output.pretty_out_ref()}: {e}"
        ) from e


# ---------- decoders ----------


def decode_project(output: ChainOutput, network: Network) -> Decoded[ChainProject] | None:
    if not _has_datum(output, "project"):
        return None
    datum = _load_datum(ProjectDatum, output, "project")
    project_id = datum.project_id.id.hex()
    status, status_time = status_of(datum.status)
    return Decoded(
        key=f"{KEY_PROJECT}:{project_id}",
        record=ChainProject(
            project_id=project_id,
            owner_address=deconstruct_address(datum.owner_address, network),
            status=status,
            status_time=status_time,
            milestone_reached=datum.milestone_reached,
            is_staking_delegation_managed_by_protocol=plutus_bool(
                datum.is_staking_delegation_managed_by_protocol
            ),
        ),
    )


def decode_project_detail(output: ChainOutput) -> Decoded[ChainProjectDetail] | None:
    if not _has_datum(output, "project detail"):
        return None
    datum = _load_datum(ProjectDetailDatum, output, "project detail")
    project_id = datum.project_id.id.hex()

    sponsorship_amount: int | None = None
    sponsorship_until: int | None = None
    if isinstance(datum.sponsorship, JustSponsorship):
        sponsorship_amount = datum.sponsorship.value.amount
        sponsorship_until = datum.sponsorship.value.until.timestamp

    last_announcement_cid: str | None = None
    if isinstance(datum.last_announcement_cid, JustCid):
        last_announcement_cid = cid_text(datum.last_announcement_cid.value)

    return Decoded(
        key=f"{KEY_PROJECT_DETAIL}:{project_id}",
        record=ChainProjectDetail(
            project_id=project_id,
            withdrawn_funds=datum.withdrawn_funds,
            sponsorship_amount=sponsorship_amount,
            sponsorship_until=sponsorship_until,
            information_cid=cid_text(datum.information_cid),
            last_announcement_cid=last_announcement_cid,
        ),
    )


def decode_project_script(output: ChainOutput) -> Decoded[ChainProjectScript] | None:
    """Decode a project script output; the stake credential is its reference script."""
    if output.script_hash is None:
        logger.warning(
            "script reference should be available for project script %s",
            output.pretty_out_ref(),
        )
        return None
    if not _has_datum(output, "project script"):
        return None
    datum = _load_datum(ProjectScriptDatum, output, "project script")
    project_id = datum.project_id.id.hex()
    return Decoded(
        key=f"{KEY_PROJECT_SCRIPT}:{project_id}",
        record=ChainProjectScript(
            project_id=project_id,
            staking_key_deposit=datum.staking_key_deposit,
            staking_script_hash=output.script_hash,
        ),
    )
