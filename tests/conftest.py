from unittest.mock import AsyncMock

import pytest
from pycardano import Network

from factories import PROJECT_DETAIL_UNIT, PROJECT_SCRIPT_UNIT, PROJECT_UNIT
from teikind.core.config import IndexerConfig, ProjectTokenSets


@pytest.fixture
def tokens() -> ProjectTokenSets:
    return ProjectTokenSets.of(
        project=[PROJECT_UNIT],
        project_detail=[PROJECT_DETAIL_UNIT],
        project_script=[PROJECT_SCRIPT_UNIT],
    )


@pytest.fixture
def config(tokens: ProjectTokenSets) -> IndexerConfig:
    return IndexerConfig(tokens=tokens, network=Network.TESTNET)


@pytest.fixture
def mock_repository():
    repo = AsyncMock()
    repo.insert_projects = AsyncMock()
    repo.insert_project_details = AsyncMock()
    repo.insert_project_scripts = AsyncMock()
    return repo


@pytest.fixture
def mock_staking():
    staking = AsyncMock()
    staking.watch = AsyncMock()
    return staking
