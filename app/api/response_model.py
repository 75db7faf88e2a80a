from pydantic import BaseModel, Field
from typing import Optional, List


class StorageInfoResponse(BaseModel):
    """ストレージ情報レスポンス"""
    client: str  # 'github' or 'memory'
    owner: Optional[str] = None
    repo: Optional[str] = None
    branch: Optional[str] = None


class PutObjectRequest(BaseModel):
    value: str = Field(..., description="保存する文字列")


class PutObjectResponse(BaseModel):
    key: str
    status: str = "stored"


class GetObjectResponse(BaseModel):
    key: str
    value: str


class RemoveObjectResponse(BaseModel):
    key: str
    removed: bool
    content: Optional[str] = None  # 削除したコンテンツ（Base64のまま）


class EntryItem(BaseModel):
    """フォルダ内エントリ"""
    name: str
    path: str
    sha: Optional[str] = None
    type: str  # 'file', 'dir', 'symlink', 'submodule'
    size: int = 0
    htmlUrl: Optional[str] = None
    downloadUrl: Optional[str] = None


class ListObjectsResponse(BaseModel):
    prefix: str
    items: List[EntryItem]
