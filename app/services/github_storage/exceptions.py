"""カスタム例外

ストレージ関連のエラーを表す例外クラス。
"""

from typing import Optional

from .messages import (
    INVALID_KEY_MESSAGE,
    BAD_CREDENTIALS_MESSAGE,
    OBJECT_NOT_FOUND_MESSAGE,
    GITHUB_API_ERROR_MESSAGE,
    INTERNAL_ERROR_MESSAGE,
    FOLDER_CONFLICT_MESSAGE,
    KEY_IS_FOLDER_MESSAGE,
    NOT_A_FOLDER_MESSAGE,
)


class StorageError(Exception):
    """ストレージ操作の基底例外"""
    default_message = "Storage error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidKeyError(StorageError):
    """キーが不正"""
    default_message = INVALID_KEY_MESSAGE


class BadCredentialsError(StorageError):
    """認証情報が不正（401）"""
    default_message = BAD_CREDENTIALS_MESSAGE


class ObjectNotFoundError(StorageError):
    """オブジェクトが見つからない（404）"""
    default_message = OBJECT_NOT_FOUND_MESSAGE


class FolderConflictError(StorageError):
    """フォルダを値で置き換えようとした"""
    default_message = FOLDER_CONFLICT_MESSAGE


class KeyIsFolderError(FolderConflictError):
    """キーがフォルダを指している"""
    default_message = KEY_IS_FOLDER_MESSAGE


class NotAFolderError(StorageError):
    """一覧対象がフォルダではない"""
    default_message = NOT_A_FOLDER_MESSAGE


class GitHubApiError(StorageError):
    """GitHub APIエラー（リトライ上限到達を含む）"""
    default_message = GITHUB_API_ERROR_MESSAGE


class RemoteApiError(StorageError):
    """リモートのエラーメッセージをそのまま返す"""

    def __init__(self, message: Optional[str] = None, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class InternalStorageError(StorageError):
    """想定外のエラー（バグまたは通信障害）"""
    default_message = INTERNAL_ERROR_MESSAGE


class StorageConfigError(StorageError):
    """設定エラー"""
    pass


class ClientNotRegisteredError(StorageError):
    """クライアントが未登録"""
    pass


class ContentsApiError(Exception):
    """
    Contents APIが返したステータス付きエラー

    クライアント実装が送出し、アダプタ側でステータスコードにより分類する。
    """

    def __init__(self, status: int, message: str = ""):
        self.status = status
        self.message = message or f"HTTP {status}"
        super().__init__(f"{status}: {self.message}")
