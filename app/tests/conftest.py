"""テスト共通フィクスチャ"""

from unittest.mock import AsyncMock

import pytest

from services.github_storage import (
    ContentsClient,
    GitHubStorage,
    InMemoryContentsClient,
)


@pytest.fixture
def memory_client():
    """空のインメモリクライアント"""
    return InMemoryContentsClient()


@pytest.fixture
def storage(memory_client):
    """インメモリクライアントを使ったアダプタ"""
    return GitHubStorage(memory_client)


@pytest.fixture
def mock_client():
    """呼び出し回数を検証するためのモッククライアント"""
    return AsyncMock(spec=ContentsClient)
