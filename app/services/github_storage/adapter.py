"""GitHubストレージアダプタ

GitHub Contents APIをキー/値ストレージとして扱うためのアダプタ。
put/get/remove/listをContents APIの呼び出しに変換し、
ステータスコードをドメイン例外に分類する。

状態は一切キャッシュせず、毎回リモートに問い合わせる。
書き込み・削除はshaによる楽観的排他のため、競合時は取得からやり直す。
"""

import logging
import time
from typing import Awaitable, List, Optional, TypeVar

from .clients.base import ContentsClient
from .exceptions import (
    ContentsApiError,
    InvalidKeyError,
    BadCredentialsError,
    ObjectNotFoundError,
    FolderConflictError,
    KeyIsFolderError,
    NotAFolderError,
    GitHubApiError,
    RemoteApiError,
    InternalStorageError,
    StorageError,
)
from .helpers import (
    valid_storage_key,
    convert_string_to_base64,
    convert_base64_to_string,
)
from .models import Committer, DEFAULT_COMMITTER, RemoteEntry, is_folder

logger = logging.getLogger(__name__)

T = TypeVar('T')


class GitHubStorage:
    """
    GitHubリポジトリをバックエンドとするキー/値ストレージ

    使用例:
        client = GitHubContentsClient(GitHubConfig(owner="acme", repo="data", token="..."))
        storage = GitHubStorage(client)
        await storage.put_object("notes/a.txt", "hello")
        value = await storage.get_object("notes/a.txt")
    """

    MAX_API_ATTEMPTS = 10

    def __init__(self, client: ContentsClient, committer: Optional[Committer] = None):
        """
        Args:
            client: Contents APIクライアント
            committer: コミッター情報。Noneの場合はDEFAULT_COMMITTER
        """
        self.client = client
        self.committer = committer or DEFAULT_COMMITTER
        logger.info(f"GitHubStorage initialized: client={type(client).__name__}, committer={self.committer.name}")

    @staticmethod
    def _timestamp() -> int:
        """コミットメッセージ用のエポックミリ秒"""
        return int(time.time() * 1000)

    async def _request(self, call: Awaitable[T]) -> T:
        """クライアント呼び出しを実行し、分類できないエラーを内部エラーに変換"""
        try:
            return await call
        except (ContentsApiError, StorageError):
            raise
        except Exception as e:
            logger.error(f"Unexpected contents client error: {e!r}")
            raise InternalStorageError() from e

    @staticmethod
    def _read_error(error: ContentsApiError) -> StorageError:
        """読み取り系（get/list）のステータス分類"""
        if error.status == 404:
            return ObjectNotFoundError()
        if error.status == 401:
            return BadCredentialsError()
        return GitHubApiError()

    # --- 書き込み系メソッド ---

    async def put_object(self, key: str, value: str) -> None:
        """
        値を保存する（存在すれば上書き、なければ作成）

        Args:
            key: ストレージキー
            value: 保存する文字列

        Raises:
            InvalidKeyError: キーが不正（通信は行わない）
            FolderConflictError: キーがフォルダを指している
            BadCredentialsError: 認証エラー（リトライしない）
            InternalStorageError: 分類できないエラー
            GitHubApiError: リトライ上限到達
        """
        if not valid_storage_key(key):
            raise InvalidKeyError()

        content = convert_string_to_base64(value)

        for attempt in range(1, self.MAX_API_ATTEMPTS + 1):
            try:
                entry = await self._request(self.client.fetch_entry(key))
                if is_folder(entry):
                    raise FolderConflictError()
                if not entry.sha:
                    raise GitHubApiError()

                await self._request(self.client.create_or_update_entry(
                    key,
                    content,
                    f"Update made at {self._timestamp()}.",
                    self.committer,
                    sha=entry.sha
                ))
                logger.debug(f"put_object updated: {key}")
                return
            except ContentsApiError as e:
                if e.status == 401:
                    raise BadCredentialsError() from e
                if e.status != 404:
                    logger.warning(f"put_object attempt {attempt} failed: {key} - {e}")
                    continue

            # 未作成のキー
            try:
                await self._request(self.client.create_or_update_entry(
                    key,
                    content,
                    f"Added at {self._timestamp()}.",
                    self.committer
                ))
                logger.debug(f"put_object created: {key}")
                return
            except ContentsApiError as e:
                if e.status == 401:
                    raise BadCredentialsError() from e
                logger.warning(f"put_object attempt {attempt} failed on create: {key} - {e}")

        logger.error(f"put_object gave up after {self.MAX_API_ATTEMPTS} attempts: {key}")
        raise GitHubApiError()

    async def remove_object(self, key: str) -> Optional[str]:
        """
        値を削除する

        Args:
            key: ストレージキー

        Returns:
            Optional[str]: 削除したコンテンツ（Base64のまま）、存在しなかった場合はNone

        Raises:
            InvalidKeyError: キーが不正（通信は行わない）
            KeyIsFolderError: キーがフォルダを指している
            BadCredentialsError: 認証エラー
            RemoteApiError: その他のAPIエラー（メッセージはリモートのまま）
            InternalStorageError: 分類できないエラー
            GitHubApiError: リトライ上限到達（409はshaの競合として再取得からやり直す）
        """
        if not valid_storage_key(key):
            raise InvalidKeyError()

        for attempt in range(1, self.MAX_API_ATTEMPTS + 1):
            try:
                entry = await self._request(self.client.fetch_entry(key))
                if is_folder(entry):
                    raise KeyIsFolderError()

                await self._request(self.client.delete_entry(
                    key,
                    entry.sha,
                    f"Delete made at {self._timestamp()}.",
                    self.committer
                ))
                logger.debug(f"remove_object deleted: {key}")
                return entry.content
            except ContentsApiError as e:
                if e.status == 404:
                    return None
                if e.status == 401:
                    raise BadCredentialsError() from e
                if e.status == 409:
                    # 取得から削除までの間にshaが変わった
                    logger.warning(f"remove_object attempt {attempt} conflicted: {key}")
                    continue
                raise RemoteApiError(e.message, status=e.status) from e

        logger.error(f"remove_object gave up after {self.MAX_API_ATTEMPTS} attempts: {key}")
        raise GitHubApiError()

    # --- 読み取り系メソッド ---

    async def get_object(self, key: str) -> str:
        """
        値を取得する

        Args:
            key: ストレージキー

        Returns:
            str: デコード済みの値

        Raises:
            InvalidKeyError: キーが不正（通信は行わない）
            KeyIsFolderError: キーがフォルダを指している
            ObjectNotFoundError: 存在しない
            BadCredentialsError: 認証エラー
            GitHubApiError: その他のAPIエラー、またはコンテンツが取得できない
            InternalStorageError: 分類できないエラー
        """
        if not valid_storage_key(key):
            raise InvalidKeyError()

        try:
            entry = await self._request(self.client.fetch_entry(key))
        except ContentsApiError as e:
            raise self._read_error(e) from e

        if is_folder(entry):
            raise KeyIsFolderError()

        # 1MB超のファイルはcontentが空でencoding="none"になる
        if entry.content is None or entry.encoding == "none":
            logger.warning(f"get_object returned no content: {key}")
            raise GitHubApiError()

        try:
            return convert_base64_to_string(entry.content)
        except ValueError as e:
            logger.error(f"get_object could not decode content: {key} - {e}")
            raise GitHubApiError() from e

    async def list_objects(self, key: str = "") -> List[RemoteEntry]:
        """
        フォルダ直下のエントリ一覧を取得する

        Args:
            key: フォルダのキー（空文字はリポジトリのルート）

        Returns:
            List[RemoteEntry]: APIの返却順のエントリ一覧

        Raises:
            InvalidKeyError: キーが不正
            NotAFolderError: キーがフォルダではない
            ObjectNotFoundError: 存在しない
            BadCredentialsError: 認証エラー
            GitHubApiError: その他のAPIエラー
            InternalStorageError: 分類できないエラー
        """
        if key and not valid_storage_key(key):
            raise InvalidKeyError()

        try:
            entry = await self._request(self.client.fetch_entry(key))
        except ContentsApiError as e:
            raise self._read_error(e) from e

        if not is_folder(entry):
            raise NotAFolderError()
        return entry

    async def aclose(self) -> None:
        """クライアントのコネクションを解放"""
        await self.client.aclose()
