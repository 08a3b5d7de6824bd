from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pycardano import Network
from pydantic import BaseModel, ValidationError

from teikind.core.errors import ConfigError


@dataclass(frozen=True)
class ProjectTokenSets:
    """Recognized protocol token units (policy id hex + asset name hex) per record kind."""

    project: frozenset[str]
    project_detail: frozenset[str]
    project_script: frozenset[str]

    @staticmethod
    def of(
        *,
        project: Iterable[str] = (),
        project_detail: Iterable[str] = (),
        project_script: Iterable[str] = (),
    ) -> ProjectTokenSets:
        """Build token sets from any iterables, normalizing units to lowercase."""
        return ProjectTokenSets(
            project=frozenset(u.lower() for u in project),
            project_detail=frozenset(u.lower() for u in project_detail),
            project_script=frozenset(u.lower() for u in project_script),
        )


@dataclass(frozen=True)
class IndexerConfig:
    """Configuration consumed by the project indexer."""

    tokens: ProjectTokenSets
    network: Network = Network.MAINNET


# ---------------------------------------------------------------------------
# Config file (JSON)
# ---------------------------------------------------------------------------


class AuthsProjectFile(BaseModel):
    project: list[str] = []
    project_detail: list[str] = []
    project_script: list[str] = []


class IndexerConfigFile(BaseModel):
    network: Literal["mainnet", "testnet"] = "mainnet"
    auths_project: AuthsProjectFile


def load_config(path: str | Path) -> IndexerConfig:
    """Read and validate a JSON config file into an `IndexerConfig`."""
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        parsed = IndexerConfigFile.model_validate(raw)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        raise ConfigError(f"invalid config file {path}: {e}") from e

    auths = parsed.auths_project
    return IndexerConfig(
        tokens=ProjectTokenSets.of(
            project=auths.project,
            project_detail=auths.project_detail,
            project_script=auths.project_script,
        ),
        network=Network.MAINNET if parsed.network == "mainnet" else Network.TESTNET,
    )
