"""クライアントレジストリ

Contents APIクライアントの動的登録・取得を管理。
"""

from typing import Dict, Type, TYPE_CHECKING

from .exceptions import ClientNotRegisteredError

if TYPE_CHECKING:
    from .clients.base import ContentsClient


class ClientRegistry:
    """Contents APIクライアントのレジストリ"""

    _clients: Dict[str, Type['ContentsClient']] = {}

    @classmethod
    def register(cls, name: str):
        """
        クライアントクラスを登録するデコレータ

        使用例:
            @ClientRegistry.register("github")
            class GitHubContentsClient(ContentsClient):
                ...
        """
        def decorator(client_class: Type['ContentsClient']):
            cls._clients[name.lower()] = client_class
            return client_class
        return decorator

    @classmethod
    def get(cls, name: str) -> Type['ContentsClient']:
        """
        名前からクライアントクラスを取得

        Args:
            name: クライアント名（'github', 'memory'等）

        Returns:
            クライアントクラス

        Raises:
            ClientNotRegisteredError: 未登録の名前が指定された場合
        """
        name_lower = name.lower()
        if name_lower not in cls._clients:
            available = ", ".join(cls._clients.keys())
            raise ClientNotRegisteredError(f"Unknown storage client: {name}. Available: {available}")
        return cls._clients[name_lower]

    @classmethod
    def list_names(cls) -> list:
        """登録済みクライアント名一覧を取得"""
        return list(cls._clients.keys())

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """クライアントが登録済みか確認"""
        return name.lower() in cls._clients
