"""データモデル定義

Contents APIのエントリとコミッター情報を表すデータクラス。
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any, List, Union


@dataclass(frozen=True)
class Committer:
    """コミッター情報（書き込み・削除時のコミットに付与）"""
    name: str
    email: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "email": self.email}


DEFAULT_COMMITTER = Committer(
    name="labcode-github-storage",
    email="labcode-github-storage@users.noreply.github.com"
)


@dataclass
class RemoteEntry:
    """Contents APIのエントリ（ファイル/ディレクトリ）"""
    name: str                        # ファイル/ディレクトリ名
    path: str                        # リポジトリ内パス
    sha: Optional[str]               # コンテンツダイジェスト
    type: str                        # "file", "dir", "symlink", "submodule"
    size: int = 0                    # バイトサイズ
    content: Optional[str] = None    # Base64コンテンツ（単一ファイル取得時のみ）
    encoding: Optional[str] = None   # "base64" or "none"
    html_url: Optional[str] = None
    download_url: Optional[str] = None

    @property
    def is_file(self) -> bool:
        return self.type == "file"

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'RemoteEntry':
        """APIレスポンスの辞書から生成"""
        return cls(
            name=data.get("name", ""),
            path=data.get("path", ""),
            sha=data.get("sha"),
            type=data.get("type", "file"),
            size=data.get("size") or 0,
            content=data.get("content"),
            encoding=data.get("encoding"),
            html_url=data.get("html_url"),
            download_url=data.get("download_url")
        )

    def to_dict(self) -> Dict[str, Any]:
        """辞書形式に変換（APIレスポンス用）"""
        result = {
            "name": self.name,
            "path": self.path,
            "sha": self.sha,
            "type": self.type,
            "size": self.size
        }
        if self.html_url:
            result["htmlUrl"] = self.html_url
        if self.download_url:
            result["downloadUrl"] = self.download_url
        return result


# フォルダはエントリのリスト（APIの返却順）で表現する
FetchResult = Union[RemoteEntry, List[RemoteEntry]]


def is_folder(result: FetchResult) -> bool:
    """取得結果がフォルダか判定"""
    return isinstance(result, list)
