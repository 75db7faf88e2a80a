"""Contents APIクライアント抽象基底クラス

すべてのクライアントが実装すべきインターフェースを定義。
ネットワーク処理はここに閉じ込め、GitHubStorageからは差し替え可能にする。
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..models import Committer, FetchResult, RemoteEntry


class ContentsClient(ABC):
    """Contents APIクライアントの抽象基底クラス"""

    @abstractmethod
    async def fetch_entry(self, path: str) -> FetchResult:
        """
        パスのエントリを取得する

        Args:
            path: リポジトリ内パス（空文字はルート）

        Returns:
            FetchResult: ファイルならRemoteEntry、フォルダならRemoteEntryのリスト

        Raises:
            ContentsApiError: APIがエラーステータスを返した場合
        """
        pass

    @abstractmethod
    async def create_or_update_entry(
        self,
        path: str,
        content: str,
        message: str,
        committer: Optional[Committer] = None,
        sha: Optional[str] = None
    ) -> RemoteEntry:
        """
        ファイルを作成または更新する

        Args:
            path: リポジトリ内パス
            content: Base64エンコード済みコンテンツ
            message: コミットメッセージ
            committer: コミッター情報
            sha: 更新時は現在のダイジェスト（作成時はNone）

        Returns:
            RemoteEntry: 書き込み後のエントリ

        Raises:
            ContentsApiError: APIがエラーステータスを返した場合
        """
        pass

    @abstractmethod
    async def delete_entry(
        self,
        path: str,
        sha: str,
        message: str,
        committer: Optional[Committer] = None
    ) -> None:
        """
        ファイルを削除する

        Args:
            path: リポジトリ内パス
            sha: 現在のダイジェスト
            message: コミットメッセージ
            committer: コミッター情報

        Raises:
            ContentsApiError: APIがエラーステータスを返した場合
        """
        pass

    async def aclose(self) -> None:
        """保持しているコネクションを解放する（オプショナル）"""
        return None
