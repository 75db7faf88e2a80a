"""GitHub Contents APIクライアント

httpxの非同期クライアントで /repos/{owner}/{repo}/contents/{path} を操作する。
"""

import logging
from typing import Optional, Dict, Any
from urllib.parse import quote

import httpx

from ..registry import ClientRegistry
from ..config import GitHubConfig
from ..exceptions import ContentsApiError
from ..models import Committer, FetchResult, RemoteEntry
from .base import ContentsClient

logger = logging.getLogger(__name__)

GITHUB_API_VERSION = "2022-11-28"


@ClientRegistry.register("github")
class GitHubContentsClient(ContentsClient):
    """GitHub Contents APIクライアント"""

    def __init__(self, config: GitHubConfig = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        GitHubクライアントを初期化

        Args:
            config: GitHub設定。Noneの場合は環境変数から読み込み
            transport: テスト用のhttpxトランスポート
        """
        if config is None:
            config = GitHubConfig.from_env()
        config.validate()

        self.owner = config.owner
        self.repo = config.repo
        self.branch = config.branch
        self._client = httpx.AsyncClient(
            base_url=config.api_url.rstrip('/'),
            headers={
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {config.token}",
                "X-GitHub-Api-Version": GITHUB_API_VERSION
            },
            timeout=config.timeout,
            transport=transport
        )
        logger.info(f"GitHubContentsClient initialized: repo={self.owner}/{self.repo}")

    def _contents_url(self, path: str) -> str:
        """コンテンツエンドポイントのURLを生成"""
        return f"/repos/{quote(self.owner)}/{quote(self.repo)}/contents/{quote(path, safe='/')}"

    @staticmethod
    def _raise_for_status(response: httpx.Response):
        """エラーステータスをContentsApiErrorに変換"""
        if response.status_code < 400:
            return
        try:
            data = response.json()
        except ValueError:
            data = None
        # ボディが辞書でない場合は本文をそのまま使う
        message = data.get('message', '') if isinstance(data, dict) else response.text
        raise ContentsApiError(response.status_code, message)

    async def fetch_entry(self, path: str) -> FetchResult:
        params = {'ref': self.branch} if self.branch else None
        response = await self._client.get(self._contents_url(path), params=params)
        logger.debug(f"GitHub GET contents: {path} -> {response.status_code}")
        self._raise_for_status(response)

        data = response.json()
        if isinstance(data, list):
            return [RemoteEntry.from_api(item) for item in data]
        return RemoteEntry.from_api(data)

    async def create_or_update_entry(
        self,
        path: str,
        content: str,
        message: str,
        committer: Optional[Committer] = None,
        sha: Optional[str] = None
    ) -> RemoteEntry:
        body: Dict[str, Any] = {
            'message': message,
            'content': content
        }
        if sha:
            body['sha'] = sha
        if committer:
            body['committer'] = committer.to_dict()
        if self.branch:
            body['branch'] = self.branch

        response = await self._client.put(self._contents_url(path), json=body)
        logger.debug(f"GitHub PUT contents: {path} -> {response.status_code}")
        self._raise_for_status(response)
        return RemoteEntry.from_api(response.json().get('content') or {})

    async def delete_entry(
        self,
        path: str,
        sha: str,
        message: str,
        committer: Optional[Committer] = None
    ) -> None:
        body: Dict[str, Any] = {
            'message': message,
            'sha': sha
        }
        if committer:
            body['committer'] = committer.to_dict()
        if self.branch:
            body['branch'] = self.branch

        # DELETEにボディを付けるためrequest()を使う
        response = await self._client.request('DELETE', self._contents_url(path), json=body)
        logger.debug(f"GitHub DELETE contents: {path} -> {response.status_code}")
        self._raise_for_status(response)

    async def aclose(self) -> None:
        await self._client.aclose()
