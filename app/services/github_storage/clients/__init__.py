"""Contents APIクライアント実装

インポート時に各クライアントをClientRegistryへ登録する。
"""

from .base import ContentsClient
from .github import GitHubContentsClient
from .memory import InMemoryContentsClient

__all__ = [
    'ContentsClient',
    'GitHubContentsClient',
    'InMemoryContentsClient'
]
