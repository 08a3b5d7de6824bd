import json
from pathlib import Path

import pytest
from pycardano import Network

from teikind.adapters.transactions import load_transaction
from teikind.core.config import load_config
from teikind.core.errors import ConfigError, TransactionFormatError


def test_load_config(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "network": "testnet",
                "auths_project": {
                    "project": ["AB01"],
                    "project_detail": ["ab02"],
                    "project_script": ["ab03", "ab04"],
                },
            }
        )
    )

    config = load_config(path)

    assert config.network == Network.TESTNET
    assert config.tokens.project == frozenset({"ab01"})
    assert config.tokens.project_detail == frozenset({"ab02"})
    assert config.tokens.project_script == frozenset({"ab03", "ab04"})


def test_load_config_rejects_unknown_network(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"network": "preview", "auths_project": {}}))

    with pytest.raises(ConfigError):
        load_config(path)


def test_load_transaction(tmp_path: Path) -> None:
    path = tmp_path / "tx.json"
    path.write_text(
        json.dumps(
            {
                "id": "aa" * 32,
                "outputs": [
                    {"id": 5, "address": "addr_test1", "assets": {"AB01": 1}, "datum": "d87980"},
                    {"id": 6},
                ],
                "mint": {"AB03": -1},
            }
        )
    )

    tx = load_transaction(path)

    assert [o.id for o in tx.outputs] == [5, 6]
    assert tx.outputs[0].assets == {"ab01": 1}
    assert tx.outputs[0].datum == bytes.fromhex("d87980")
    assert tx.outputs[1].index == 1
    assert tx.outputs[1].assets is None
    assert tx.mint == {"ab03": -1}


def test_load_transaction_rejects_bad_datum_hex(tmp_path: Path) -> None:
    path = tmp_path / "tx.json"
    path.write_text(
        json.dumps({"id": "aa", "outputs": [{"id": 1, "datum": "zz"}]})
    )

    with pytest.raises(TransactionFormatError):
        load_transaction(path)
