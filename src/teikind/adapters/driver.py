"""Single-transaction driver and stake watch recorder.

`TransactionDriver` stands in for the chain-sync driver when one already
loaded transaction is indexed (CLI replays, tests). It resolves indices
against the transaction's outputs, applies the decoder, keeps the last
record per dedup key, and records notify/refresh signals in call order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace
from typing import TypeVar

from teikind.core.interfaces import IChainDriver, IStakingWatcher
from teikind.core.models import ChainOutput, ChainTransaction, Decoded, StoredRow

logger = logging.getLogger(__name__)

R = TypeVar("R")


class TransactionDriver(IChainDriver):
    def __init__(self, tx: ChainTransaction) -> None:
        self.tx = tx
        self.notified: list[str] = []
        self.refreshed: list[str] = []

    def _store(
        self,
        indices: Sequence[int],
        decode: Callable[[ChainOutput], Decoded[R] | None],
        *,
        with_script: bool,
    ) -> list[StoredRow[R]]:
        by_key: dict[str, StoredRow[R]] = {}
        for index in indices:
            output = self.tx.outputs[index]
            if not with_script:
                output = replace(output, script_hash=None)
            decoded = decode(output)
            if decoded is None:
                continue
            # last wins, ordered by last appearance
            by_key.pop(decoded.key, None)
            by_key[decoded.key] = StoredRow(output_id=output.id, record=decoded.record)
        return list(by_key.values())

    async def store(
        self,
        indices: Sequence[int],
        decode: Callable[[ChainOutput], Decoded[R] | None],
    ) -> list[StoredRow[R]]:
        return self._store(indices, decode, with_script=False)

    async def store_with_script(
        self,
        indices: Sequence[int],
        decode: Callable[[ChainOutput], Decoded[R] | None],
    ) -> list[StoredRow[R]]:
        return self._store(indices, decode, with_script=True)

    async def notify(self, topic: str) -> None:
        logger.debug("notify %s", topic)
        self.notified.append(topic)

    async def refresh(self, view: str) -> None:
        logger.debug("refresh %s", view)
        self.refreshed.append(view)


@dataclass
class RecordingStakingWatcher(IStakingWatcher):
    """Stake watch registry that only remembers what it was asked to watch."""

    watched: list[tuple[str, str]] = field(default_factory=list)

    async def watch(self, script_hash: str, kind: str) -> None:
        logger.debug("watch %s (%s)", script_hash, kind)
        self.watched.append((script_hash, kind))
