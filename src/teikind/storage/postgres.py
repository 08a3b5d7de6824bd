from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone

import psycopg

from teikind.core.interfaces import IProjectRepository
from teikind.core.models import ChainProject, ChainProjectDetail, ChainProjectScript, StoredRow
from teikind.storage import sql_queries


def posix_ms_to_datetime(ms: int | None) -> datetime | None:
    """Convert a Plutus POSIX time (milliseconds) to an aware UTC datetime."""
    if ms is None:
        return None
    return datetime.fromtimestamp(ms / 1000, tz=timezone.utc)


def project_params(row: StoredRow[ChainProject]) -> tuple:
    p = row.record
    return (
        row.output_id,
        p.project_id,
        p.owner_address,
        p.status.value,
        posix_ms_to_datetime(p.status_time),
        p.milestone_reached,
        p.is_staking_delegation_managed_by_protocol,
    )


def project_detail_params(row: StoredRow[ChainProjectDetail]) -> tuple:
    d = row.record
    return (
        row.output_id,
        d.project_id,
        d.withdrawn_funds,
        d.sponsorship_amount,
        posix_ms_to_datetime(d.sponsorship_until),
        d.information_cid,
        d.last_announcement_cid,
    )


def project_script_params(row: StoredRow[ChainProjectScript]) -> tuple:
    s = row.record
    return (row.output_id, s.project_id, s.staking_key_deposit, s.staking_script_hash)


class PostgresProjectRepository(IProjectRepository):
    """
    Insert-only project repository over a psycopg async connection.

    Transaction boundaries belong to the caller: inserts run on the given
    connection and errors propagate so the enclosing unit can roll back.
    """

    def __init__(self, conn: psycopg.AsyncConnection) -> None:
        self._conn = conn

    async def _insert_many(self, query: str, params: list[tuple]) -> None:
        async with self._conn.cursor() as cur:
            await cur.executemany(query, params)

    async def insert_projects(self, rows: Sequence[StoredRow[ChainProject]]) -> None:
        await self._insert_many(sql_queries.INSERT_PROJECT, [project_params(r) for r in rows])

    async def insert_project_details(
        self, rows: Sequence[StoredRow[ChainProjectDetail]]
    ) -> None:
        await self._insert_many(
            sql_queries.INSERT_PROJECT_DETAIL, [project_detail_params(r) for r in rows]
        )

    async def insert_project_scripts(
        self, rows: Sequence[StoredRow[ChainProjectScript]]
    ) -> None:
        await self._insert_many(
            sql_queries.INSERT_PROJECT_SCRIPT, [project_script_params(r) for r in rows]
        )
