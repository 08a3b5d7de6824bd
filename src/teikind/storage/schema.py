from __future__ import annotations

import logging

import psycopg

from teikind.storage import sql_queries

logger = logging.getLogger(__name__)


async def setup_schema(conn: psycopg.AsyncConnection) -> None:
    """Create the project enum type, tables and indices if they do not exist.

    Safe to call on every start: each statement checks for existence first.
    All statements run in a single transaction.
    """
    async with conn.transaction():
        for statement in sql_queries.SETUP_STATEMENTS:
            await conn.execute(statement)
    logger.info("project schema ready (%d statements)", len(sql_queries.SETUP_STATEMENTS))
