from __future__ import annotations

from .core.config import IndexerConfig, ProjectTokenSets, load_config
from .core.models import ChainOutput, ChainTransaction, ProjectStatus
from .core.use_cases import HandlerContext, classify, dispatch
from .storage.schema import setup_schema

__all__ = [
    "IndexerConfig",
    "ProjectTokenSets",
    "load_config",
    "ChainOutput",
    "ChainTransaction",
    "ProjectStatus",
    "HandlerContext",
    "classify",
    "dispatch",
    "setup_schema",
]
