"""統合ストレージサービス

設定からContents APIクライアントを組み立て、GitHubStorageを提供する。
"""

import logging
from typing import Optional, List

from .adapter import GitHubStorage
from .config import StorageConfig
from .registry import ClientRegistry
from .clients.base import ContentsClient
from .models import RemoteEntry

logger = logging.getLogger(__name__)


class StorageService:
    """
    統合ストレージサービス（シングルトン）

    環境変数STORAGE_CLIENTでクライアントを切り替え:
    - 'github': GitHub Contents API（デフォルト）
    - 'memory': インメモリ（開発・テスト用）
    """

    _instance: Optional['StorageService'] = None
    _config: Optional[StorageConfig] = None

    def __new__(cls, config: Optional[StorageConfig] = None):
        if cls._instance is None:
            # 初期化に失敗した場合はインスタンスを保持しない
            instance = super().__new__(cls)
            instance._initialize(config)
            cls._instance = instance
        return cls._instance

    def _initialize(self, config: Optional[StorageConfig] = None):
        """クライアントとアダプタを初期化"""
        self._config = config or StorageConfig.from_env()

        # レジストリからクライアントクラスを取得
        client_class = ClientRegistry.get(self._config.client)
        client = client_class(self._config.github)

        self._storage = GitHubStorage(client, committer=self._config.github.committer)
        self.client_name = self._config.client
        logger.info(f"StorageService initialized: client={self.client_name}")

    @property
    def storage(self) -> GitHubStorage:
        """アダプタインスタンスを取得"""
        return self._storage

    @property
    def client(self) -> ContentsClient:
        """クライアントインスタンスを取得"""
        return self._storage.client

    @property
    def config(self) -> StorageConfig:
        """設定を取得"""
        return self._config

    async def put_object(self, key: str, value: str) -> None:
        """値を保存"""
        await self._storage.put_object(key, value)

    async def get_object(self, key: str) -> str:
        """値を取得"""
        return await self._storage.get_object(key)

    async def remove_object(self, key: str) -> Optional[str]:
        """値を削除"""
        return await self._storage.remove_object(key)

    async def list_objects(self, key: str = "") -> List[RemoteEntry]:
        """フォルダ直下の一覧を取得"""
        return await self._storage.list_objects(key)

    @classmethod
    async def close(cls):
        """
        クライアントのコネクションを解放し、インスタンスを破棄する

        解放済みのクライアントを次回の起動で使い回さないようにする。
        """
        if cls._instance is not None:
            await cls._instance.storage.aclose()
        cls.reset_instance()

    @classmethod
    def reset_instance(cls):
        """
        シングルトンインスタンスをリセット

        コネクションは解放しない。アプリ終了時はclose()を使うこと
        """
        cls._instance = None
        cls._config = None


def get_storage(config: Optional[StorageConfig] = None) -> StorageService:
    """StorageServiceのシングルトンインスタンスを取得"""
    return StorageService(config)
