"""Relational storage for project records (PostgreSQL).

This package provides:
- setup_schema: idempotent creation of the project tables, enum and indices
- PostgresProjectRepository: insert-only repository for decoded records
"""

from teikind.storage.postgres import PostgresProjectRepository
from teikind.storage.schema import setup_schema

__all__ = [
    "PostgresProjectRepository",
    "setup_schema",
]
