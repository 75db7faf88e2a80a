"""ヘルパー関数

キー検証とBase64変換。
"""

import base64
import re

MAX_KEY_LENGTH = 1024

# 制御文字とWindows/URLで問題になる記号
_DISALLOWED_CHARS = re.compile(r'[\x00-\x1f\x7f\\:*?"<>|]')


def valid_storage_key(key) -> bool:
    """
    ストレージキーとして使用可能か判定する

    Args:
        key: 判定対象のキー

    Returns:
        bool: 使用可能な場合True
    """
    if not isinstance(key, str) or not key.strip():
        return False
    if len(key) > MAX_KEY_LENGTH:
        return False
    if key.startswith('/'):
        return False
    if _DISALLOWED_CHARS.search(key):
        return False
    for segment in key.split('/'):
        if segment in ('', '.', '..'):
            return False
    return True


def convert_string_to_base64(value: str) -> str:
    """文字列をUTF-8でBase64エンコード"""
    return base64.b64encode(value.encode('utf-8')).decode('ascii')


def convert_base64_to_string(content: str) -> str:
    """Base64をデコードして文字列に戻す（GitHubが挿入する改行は無視）"""
    return base64.b64decode(content).decode('utf-8')
