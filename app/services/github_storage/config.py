"""ストレージ設定クラス

環境変数からの設定読み込みを一元管理。
"""

from dataclasses import dataclass, field
from typing import Optional
import os

from .exceptions import StorageConfigError
from .models import Committer


@dataclass
class GitHubConfig:
    """GitHubリポジトリ固有設定"""
    owner: str = ""
    repo: str = ""
    token: str = ""
    committer: Optional[Committer] = None
    api_url: str = "https://api.github.com"
    branch: Optional[str] = None
    timeout: float = 30.0

    @classmethod
    def from_env(cls) -> 'GitHubConfig':
        """環境変数から設定を読み込み"""
        committer_name = os.getenv('GITHUB_COMMITTER_NAME')
        committer_email = os.getenv('GITHUB_COMMITTER_EMAIL')
        committer = None
        # 名前とメールの両方が揃った場合のみ採用
        if committer_name and committer_email:
            committer = Committer(name=committer_name, email=committer_email)

        return cls(
            owner=os.getenv('GITHUB_OWNER', ''),
            repo=os.getenv('GITHUB_REPO', ''),
            token=os.getenv('GITHUB_TOKEN', ''),
            committer=committer,
            api_url=os.getenv('GITHUB_API_URL', 'https://api.github.com'),
            branch=os.getenv('GITHUB_BRANCH') or None,
            timeout=float(os.getenv('GITHUB_TIMEOUT', '30'))
        )

    def validate(self):
        """必須項目の確認"""
        missing = [
            name for name, value in (
                ('owner', self.owner),
                ('repo', self.repo),
                ('token', self.token)
            ) if not value
        ]
        if missing:
            raise StorageConfigError(f"Missing GitHub settings: {', '.join(missing)}")


@dataclass
class StorageConfig:
    """統合ストレージ設定"""
    client: str = "github"
    github: GitHubConfig = field(default_factory=GitHubConfig)

    @classmethod
    def from_env(cls) -> 'StorageConfig':
        """環境変数から設定を読み込み"""
        return cls(
            client=os.getenv('STORAGE_CLIENT', 'github').lower(),
            github=GitHubConfig.from_env()
        )
