"""リクエスト送信前の識別子バリデーション"""

from __future__ import annotations

from .exceptions import SchemaRegistryError, SchemaRegistryErrorCodes

MIN_SCHEMA_VERSION_ID = 1
MAX_SCHEMA_VERSION_ID = 2**31 - 1


def check_schema_version_id(version_id: int) -> None:
    """バージョン ID が 1 以上 2^31-1 以下の整数であることを検証する。

    レジストリ上に存在するかどうかは確認しない。負数や 0 のような
    呼び出し側の誤りをネットワーク往復なしで検出するためのもの。

    Raises:
        SchemaRegistryError: code が INVALID_VERSION_ID のエラー
    """
    if not isinstance(version_id, int) or isinstance(version_id, bool):
        raise SchemaRegistryError(
            code=SchemaRegistryErrorCodes.INVALID_VERSION_ID,
            message=f"version ID must be an integer, got {type(version_id).__name__}",
        )
    if version_id < MIN_SCHEMA_VERSION_ID:
        raise SchemaRegistryError(
            code=SchemaRegistryErrorCodes.INVALID_VERSION_ID,
            message=f"version ID must be >= {MIN_SCHEMA_VERSION_ID}, got {version_id}",
        )
    if version_id > MAX_SCHEMA_VERSION_ID:
        raise SchemaRegistryError(
            code=SchemaRegistryErrorCodes.INVALID_VERSION_ID,
            message=f"version ID must be <= {MAX_SCHEMA_VERSION_ID}, got {version_id}",
        )
