"""インメモリContents APIクライアント

GitHub Contents APIと同じ振る舞い（blob sha、楽観的排他、フォルダ表現）を
プロセス内の辞書で再現する。開発環境とテスト専用で、データは永続化しない。
"""

import base64
import hashlib
import logging
from collections import deque
from typing import Deque, Dict, List, Optional, Any

from ..registry import ClientRegistry
from ..config import GitHubConfig
from ..exceptions import ContentsApiError
from ..models import Committer, FetchResult, RemoteEntry
from .base import ContentsClient

logger = logging.getLogger(__name__)


def git_blob_sha(content: str) -> str:
    """Base64コンテンツからgitのblob shaを計算"""
    data = base64.b64decode(content)
    header = f"blob {len(data)}\0".encode('ascii')
    return hashlib.sha1(header + data).hexdigest()


@ClientRegistry.register("memory")
class InMemoryContentsClient(ContentsClient):
    """インメモリContents APIクライアント"""

    def __init__(self, config: GitHubConfig = None, max_commits: int = 1000):
        """
        インメモリクライアントを初期化

        Args:
            config: GitHub設定（owner/repoはURL生成のみに使用）
            max_commits: 保持するコミット履歴の上限（古いものから破棄）
        """
        if config is None:
            config = GitHubConfig()
        self.owner = config.owner or "local"
        self.repo = config.repo or "storage"
        self._files: Dict[str, Dict[str, str]] = {}
        self.commits: Deque[Dict[str, Any]] = deque(maxlen=max_commits)
        logger.info(f"InMemoryContentsClient initialized: repo={self.owner}/{self.repo}")

    def _file_entry(self, path: str, with_content: bool = True) -> RemoteEntry:
        stored = self._files[path]
        return RemoteEntry(
            name=path.rsplit('/', 1)[-1],
            path=path,
            sha=stored['sha'],
            type="file",
            size=len(base64.b64decode(stored['content'])),
            content=stored['content'] if with_content else None,
            encoding="base64" if with_content else None,
            html_url=f"memory://{self.owner}/{self.repo}/blob/{path}"
        )

    def _children(self, path: str) -> Optional[List[RemoteEntry]]:
        """直下のエントリ一覧。フォルダとして存在しない場合はNone"""
        prefix = f"{path}/" if path else ""
        names: Dict[str, str] = {}
        for file_path in self._files:
            if not file_path.startswith(prefix):
                continue
            rest = file_path[len(prefix):]
            name, sep, _ = rest.partition('/')
            names[name] = "dir" if sep else "file"

        if not names and path:
            return None

        entries = []
        for name in sorted(names):
            child_path = f"{prefix}{name}"
            if names[name] == "file":
                entries.append(self._file_entry(child_path, with_content=False))
            else:
                entries.append(RemoteEntry(name=name, path=child_path, sha=None, type="dir"))
        return entries

    def _record_commit(self, action: str, path: str, message: str, committer: Optional[Committer]):
        self.commits.append({
            'action': action,
            'path': path,
            'message': message,
            'committer': committer.to_dict() if committer else None
        })

    async def fetch_entry(self, path: str) -> FetchResult:
        path = path.strip('/')
        if path in self._files:
            return self._file_entry(path)

        children = self._children(path)
        if children is None:
            raise ContentsApiError(404, "Not Found")
        return children

    async def create_or_update_entry(
        self,
        path: str,
        content: str,
        message: str,
        committer: Optional[Committer] = None,
        sha: Optional[str] = None
    ) -> RemoteEntry:
        path = path.strip('/')
        current = self._files.get(path)

        if current is None:
            if self._children(path) is not None:
                raise ContentsApiError(422, f"{path} is a directory")
            parts = path.split('/')
            for i in range(1, len(parts)):
                if '/'.join(parts[:i]) in self._files:
                    raise ContentsApiError(422, f"{'/'.join(parts[:i])} is a file")
            if sha:
                raise ContentsApiError(409, f"{path} does not match {sha}")
            action = "create"
        else:
            if not sha:
                raise ContentsApiError(422, "Invalid request.\n\n\"sha\" wasn't supplied.")
            if sha != current['sha']:
                raise ContentsApiError(409, f"{path} does not match {sha}")
            action = "update"

        self._files[path] = {'content': content, 'sha': git_blob_sha(content)}
        self._record_commit(action, path, message, committer)
        logger.debug(f"Memory {action}: {path}")
        return self._file_entry(path, with_content=False)

    async def delete_entry(
        self,
        path: str,
        sha: str,
        message: str,
        committer: Optional[Committer] = None
    ) -> None:
        path = path.strip('/')
        current = self._files.get(path)
        if current is None:
            raise ContentsApiError(404, "Not Found")
        if sha != current['sha']:
            raise ContentsApiError(409, f"{path} does not match {sha}")

        del self._files[path]
        self._record_commit("delete", path, message, committer)
        logger.debug(f"Memory delete: {path}")
