import logging

import pytest
from pycardano import Address, Network, VerificationKeyHash

from factories import (
    OWNER_KEY_HASH,
    STAKING_SCRIPT_HASH,
    make_output,
    project_datum,
    project_detail_datum,
    project_id_bytes,
    project_script_datum,
)
from teikind.core.errors import DatumDecodeError
from teikind.core.models import ProjectStatus
from teikind.decoding.datums import (
    JustStakingCredential,
    Nothing,
    PlutusAddress,
    PubKeyCredential,
    ScriptCredential,
    StakingHash,
    StatusActive,
    StatusClosed,
    StatusDelisted,
    StatusPreClosed,
    StatusPreDelisted,
    Time,
)
from teikind.decoding.decoder import (
    decode_project,
    decode_project_detail,
    decode_project_script,
    status_of,
)
from teikind.decoding.utils import deconstruct_address

PID_HEX = project_id_bytes(1).hex()


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        (StatusActive(), (ProjectStatus.ACTIVE, None)),
        (StatusPreClosed(Time(1)), (ProjectStatus.PRE_CLOSED, 1)),
        (StatusPreDelisted(Time(2)), (ProjectStatus.PRE_DELISTED, 2)),
        (StatusClosed(Time(3)), (ProjectStatus.CLOSED, 3)),
        (StatusDelisted(Time(4)), (ProjectStatus.DELISTED, 4)),
    ],
)
def test_status_of(status, expected) -> None:
    assert status_of(status) == expected


def test_decode_project_closed_status_time() -> None:
    output = make_output(0, datum=project_datum(status=StatusClosed(Time(1_700_000_000_000))))

    decoded = decode_project(output, Network.TESTNET)

    assert decoded is not None
    assert decoded.record.status is ProjectStatus.CLOSED
    assert decoded.record.status_time == 1_700_000_000_000


def test_decode_project_fields() -> None:
    output = make_output(
        0,
        datum=project_datum(
            status=StatusPreClosed(Time(1_700_000_000)), milestone_reached=2, managed=False
        ),
    )

    decoded = decode_project(output, Network.TESTNET)

    assert decoded is not None
    assert decoded.key == f"project:{PID_HEX}"
    project = decoded.record
    assert project.project_id == PID_HEX
    assert project.status is ProjectStatus.PRE_CLOSED
    assert project.status_time == 1_700_000_000
    assert project.milestone_reached == 2
    assert project.is_staking_delegation_managed_by_protocol is False
    assert project.owner_address == Address(
        VerificationKeyHash(OWNER_KEY_HASH), network=Network.TESTNET
    ).encode()


def test_decode_project_without_datum_is_skipped(caplog: pytest.LogCaptureFixture) -> None:
    output = make_output(3)

    with caplog.at_level(logging.WARNING):
        assert decode_project(output, Network.TESTNET) is None

    assert output.pretty_out_ref() in caplog.text


def test_decode_project_detail_with_sponsorship_and_announcement() -> None:
    output = make_output(
        0,
        datum=project_detail_datum(
            withdrawn_funds=5_000_000,
            sponsorship=(10_000_000, 1_800_000_000_000),
            information_cid="bafyinfo",
            last_announcement_cid="bafyannouncement",
        ),
    )

    decoded = decode_project_detail(output)

    assert decoded is not None
    assert decoded.key == f"project-detail:{PID_HEX}"
    detail = decoded.record
    assert detail.withdrawn_funds == 5_000_000
    assert detail.sponsorship_amount == 10_000_000
    assert detail.sponsorship_until == 1_800_000_000_000
    assert detail.information_cid == "bafyinfo"
    assert detail.last_announcement_cid == "bafyannouncement"


def test_decode_project_detail_without_sponsorship() -> None:
    decoded = decode_project_detail(make_output(0, datum=project_detail_datum()))

    assert decoded is not None
    assert decoded.record.sponsorship_amount is None
    assert decoded.record.sponsorship_until is None
    assert decoded.record.last_announcement_cid is None


def test_decode_project_script_uses_reference_script_hash() -> None:
    output = make_output(
        0,
        datum=project_script_datum(staking_key_deposit=2_000_000),
        script_hash=STAKING_SCRIPT_HASH,
    )

    decoded = decode_project_script(output)

    assert decoded is not None
    assert decoded.key == f"project-script:{PID_HEX}"
    assert decoded.record.staking_key_deposit == 2_000_000
    assert decoded.record.staking_script_hash == STAKING_SCRIPT_HASH


def test_decode_project_script_requires_reference_script() -> None:
    output = make_output(0, datum=project_script_datum())

    assert decode_project_script(output) is None


def test_decode_project_script_requires_datum() -> None:
    output = make_output(0, script_hash=STAKING_SCRIPT_HASH)

    assert decode_project_script(output) is None


def test_deconstruct_address_with_script_payment_and_key_stake() -> None:
    script_hash = bytes.fromhex("12" * 28)
    stake_hash = bytes.fromhex("34" * 28)
    address = PlutusAddress(
        ScriptCredential(script_hash),
        JustStakingCredential(StakingHash(PubKeyCredential(stake_hash))),
    )

    bech32 = deconstruct_address(address, Network.MAINNET)

    parsed = Address.decode(bech32)
    assert parsed.payment_part.payload == script_hash
    assert parsed.staking_part.payload == stake_hash
    assert parsed.network == Network.MAINNET


def test_deconstruct_address_enterprise() -> None:
    address = PlutusAddress(PubKeyCredential(OWNER_KEY_HASH), Nothing())

    bech32 = deconstruct_address(address, Network.TESTNET)

    assert bech32.startswith("addr_test1")
    assert Address.decode(bech32).staking_part is None


def test_decode_project_rejects_malformed_datum() -> None:
    output = make_output(0, datum=bytes.fromhex("d87a80"))

    with pytest.raises(DatumDecodeError, match=output.pretty_out_ref()):
        decode_project(output, Network.TESTNET)
