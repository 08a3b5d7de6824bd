"""Core data models, configuration, and collaborator interfaces.

This package provides:
- Data models (ChainOutput, ChainTransaction, project records, events)
- Configuration classes (ProjectTokenSets, IndexerConfig)
- Collaborator protocols (IChainDriver, IStakingWatcher, IProjectRepository)
"""

from teikind.core.config import IndexerConfig, ProjectTokenSets, load_config
from teikind.core.errors import (
    ConfigError,
    DatumDecodeError,
    TeikindError,
    TransactionFormatError,
)
from teikind.core.models import (
    ChainOutput,
    ChainProject,
    ChainProjectDetail,
    ChainProjectScript,
    ChainTransaction,
    Decoded,
    Event,
    ProjectDetailEvent,
    ProjectEvent,
    ProjectScriptCeasedEvent,
    ProjectScriptEvent,
    ProjectStatus,
    StoredRow,
)

__all__ = [
    "IndexerConfig",
    "ProjectTokenSets",
    "load_config",
    "ConfigError",
    "DatumDecodeError",
    "TeikindError",
    "TransactionFormatError",
    "ChainOutput",
    "ChainProject",
    "ChainProjectDetail",
    "ChainProjectScript",
    "ChainTransaction",
    "Decoded",
    "Event",
    "ProjectDetailEvent",
    "ProjectEvent",
    "ProjectScriptCeasedEvent",
    "ProjectScriptEvent",
    "ProjectStatus",
    "StoredRow",
]
