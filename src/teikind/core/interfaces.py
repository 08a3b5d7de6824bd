from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol, TypeVar, runtime_checkable

from teikind.core.models import (
    ChainOutput,
    ChainProject,
    ChainProjectDetail,
    ChainProjectScript,
    Decoded,
    StoredRow,
)

R = TypeVar("R")


# ---------------------------------------------------------------------------
# IChainDriver
# ---------------------------------------------------------------------------

@runtime_checkable
class IChainDriver(Protocol):
    """
    Chain-sync driver handing transactions to the indexer.

    Domain expectations:
    - `store` resolves output indices of the current transaction, applies
      `decode` to each, drops outputs where `decode` returned None and keeps
      the last record per dedup key.
    - `notify` / `refresh` are fire-and-forget downstream signals.
    """

    async def store(
        self,
        indices: Sequence[int],
        decode: Callable[[ChainOutput], Decoded[R] | None],
    ) -> list[StoredRow[R]]:
        """
        Decode and deduplicate outputs, returning the rows to insert.

        Each returned row carries the output surrogate id it belongs to.
        """
        ...

    async def store_with_script(
        self,
        indices: Sequence[int],
        decode: Callable[[ChainOutput], Decoded[R] | None],
    ) -> list[StoredRow[R]]:
        """
        Same as `store`, with `ChainOutput.script_hash` resolved from the
        output's reference script.
        """
        ...

    async def notify(self, topic: str) -> None:
        """Fire a named, parameterless downstream signal."""
        ...

    async def refresh(self, view: str) -> None:
        """Request an asynchronous refresh of a materialized view."""
        ...


# ---------------------------------------------------------------------------
# IStakingWatcher
# ---------------------------------------------------------------------------

@runtime_checkable
class IStakingWatcher(Protocol):
    """Registry of stake credentials tracked by downstream stake processing."""

    async def watch(self, script_hash: str, kind: str) -> None:
        ...


# ---------------------------------------------------------------------------
# IProjectRepository
# ---------------------------------------------------------------------------

@runtime_checkable
class IProjectRepository(Protocol):
    """
    Insert-only sink for decoded project records.

    Domain expectations:
    - One row per StoredRow, keyed by `output_id`.
    - Failures (constraint violation, lost connection) propagate.
    """

    async def insert_projects(self, rows: Sequence[StoredRow[ChainProject]]) -> None:
        ...

    async def insert_project_details(
        self, rows: Sequence[StoredRow[ChainProjectDetail]]
    ) -> None:
        ...

    async def insert_project_scripts(
        self, rows: Sequence[StoredRow[ChainProjectScript]]
    ) -> None:
        ...
