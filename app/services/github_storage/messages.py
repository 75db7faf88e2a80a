"""エラーメッセージ定数

呼び出し元に返す固定メッセージを一元管理。
"""

INVALID_KEY_MESSAGE = "Invalid key"
BAD_CREDENTIALS_MESSAGE = "Bad credentials"
OBJECT_NOT_FOUND_MESSAGE = "Object not found"
GITHUB_API_ERROR_MESSAGE = "GitHub API error"
INTERNAL_ERROR_MESSAGE = "Internal error"

FOLDER_CONFLICT_MESSAGE = "Cannot replace value of a folder"
KEY_IS_FOLDER_MESSAGE = "Key points to a folder"
NOT_A_FOLDER_MESSAGE = "Not a folder"
