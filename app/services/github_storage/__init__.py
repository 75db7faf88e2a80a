"""GitHub Storage Module - GitHubリポジトリを使ったキー/値ストレージ

GitHub Contents APIをバックエンドに、文字列の保存・取得・削除・一覧を提供する。
"""

from .config import StorageConfig, GitHubConfig
from .models import Committer, DEFAULT_COMMITTER, RemoteEntry
from .registry import ClientRegistry
from .adapter import GitHubStorage
from .service import StorageService, get_storage
from .clients import ContentsClient, GitHubContentsClient, InMemoryContentsClient
from .exceptions import (
    StorageError,
    InvalidKeyError,
    BadCredentialsError,
    ObjectNotFoundError,
    FolderConflictError,
    KeyIsFolderError,
    NotAFolderError,
    GitHubApiError,
    RemoteApiError,
    InternalStorageError,
    StorageConfigError,
    ClientNotRegisteredError,
    ContentsApiError
)

__all__ = [
    'StorageConfig',
    'GitHubConfig',
    'Committer',
    'DEFAULT_COMMITTER',
    'RemoteEntry',
    'ClientRegistry',
    'GitHubStorage',
    'StorageService',
    'get_storage',
    'ContentsClient',
    'GitHubContentsClient',
    'InMemoryContentsClient',
    'StorageError',
    'InvalidKeyError',
    'BadCredentialsError',
    'ObjectNotFoundError',
    'FolderConflictError',
    'KeyIsFolderError',
    'NotAFolderError',
    'GitHubApiError',
    'RemoteApiError',
    'InternalStorageError',
    'StorageConfigError',
    'ClientNotRegisteredError',
    'ContentsApiError'
]

__version__ = '1.0.0'
