"""オブジェクトAPI（GitHubストレージ連携）

GitHubリポジトリ上のキー/値を操作するAPIエンドポイント:
- GET /api/storage/info: ストレージ情報
- GET /api/objects: フォルダ直下の一覧
- GET /api/objects/{key}: 値の取得
- PUT /api/objects/{key}: 値の保存
- DELETE /api/objects/{key}: 値の削除
"""

import logging
from fastapi import APIRouter, HTTPException, Query

from api.response_model import (
    StorageInfoResponse,
    PutObjectRequest,
    PutObjectResponse,
    GetObjectResponse,
    RemoveObjectResponse,
    ListObjectsResponse,
    EntryItem,
)
from services.github_storage import (
    get_storage,
    StorageError,
    InvalidKeyError,
    BadCredentialsError,
    ObjectNotFoundError,
    FolderConflictError,
    NotAFolderError,
    GitHubApiError,
    RemoteApiError,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# 例外クラス → HTTPステータス（上から順に判定）
ERROR_STATUS_MAP = [
    (InvalidKeyError, 400),
    (BadCredentialsError, 401),
    (ObjectNotFoundError, 404),
    (FolderConflictError, 409),
    (NotAFolderError, 409),
    (GitHubApiError, 502),
    (RemoteApiError, 502),
]


def to_http_exception(error: StorageError) -> HTTPException:
    """ストレージ例外をHTTPExceptionに変換"""
    for error_class, status_code in ERROR_STATUS_MAP:
        if isinstance(error, error_class):
            return HTTPException(status_code=status_code, detail=error.message)
    return HTTPException(status_code=500, detail=error.message)


@router.get("/storage/info", tags=["objects"], response_model=StorageInfoResponse)
async def get_storage_info():
    """
    ストレージ情報を取得する

    Returns:
        StorageInfoResponse: クライアント種別とリポジトリ
    """
    try:
        storage = get_storage()
        github = storage.config.github
        return StorageInfoResponse(
            client=storage.client_name,
            owner=github.owner or None,
            repo=github.repo or None,
            branch=github.branch
        )
    except StorageError as e:
        logger.error(f"Error getting storage info: {e}")
        raise HTTPException(status_code=500, detail=e.message)
    except Exception as e:
        logger.error(f"Error getting storage info: {e}")
        raise HTTPException(status_code=500, detail="Failed to get storage info")


@router.get("/objects", tags=["objects"], response_model=ListObjectsResponse)
async def list_objects(
    prefix: str = Query("", description="フォルダのキー（空文字はルート）")
):
    """フォルダ直下のエントリ一覧を取得"""
    try:
        entries = await get_storage().list_objects(prefix)
        return ListObjectsResponse(
            prefix=prefix,
            items=[EntryItem(**entry.to_dict()) for entry in entries]
        )
    except StorageError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Unexpected error in list_objects: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/objects/{key:path}", tags=["objects"], response_model=GetObjectResponse)
async def get_object(key: str):
    """値を取得"""
    try:
        value = await get_storage().get_object(key)
        return GetObjectResponse(key=key, value=value)
    except StorageError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Unexpected error in get_object: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.put("/objects/{key:path}", tags=["objects"], response_model=PutObjectResponse)
async def put_object(key: str, request: PutObjectRequest):
    """値を保存（存在する場合は上書き）"""
    try:
        await get_storage().put_object(key, request.value)
        return PutObjectResponse(key=key)
    except StorageError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Unexpected error in put_object: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.delete("/objects/{key:path}", tags=["objects"], response_model=RemoveObjectResponse)
async def remove_object(key: str):
    """
    値を削除

    存在しないキーの削除も成功扱い（removed=False）
    """
    try:
        content = await get_storage().remove_object(key)
        return RemoveObjectResponse(key=key, removed=content is not None, content=content)
    except StorageError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Unexpected error in remove_object: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")
