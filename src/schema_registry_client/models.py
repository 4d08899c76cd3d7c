"""Schema Registry データモデル"""

from __future__ import annotations

from dataclasses import dataclass

CONTENT_TYPE_SCHEMA_JSON = "application/vnd.schemaregistry.v1+json"
CONTENT_TYPE_SCHEMA_JSON_UNVERSIONED = "application/vnd.schemaregistry+json"
CONTENT_TYPE_JSON = "application/json"

SCHEMA_REGISTRY_CONTENT_TYPES = frozenset(
    {CONTENT_TYPE_SCHEMA_JSON, CONTENT_TYPE_SCHEMA_JSON_UNVERSIONED}
)


class RegistryErrorCodes:
    """レジストリが返す error_code の既知の値。"""

    SUBJECT_NOT_FOUND: int = 40401
    VERSION_NOT_FOUND: int = 40402
    SCHEMA_NOT_FOUND: int = 40403
    INVALID_SCHEMA: int = 42201
    INVALID_VERSION: int = 42202
    BACKEND_STORE_ERROR: int = 50001
    OPERATION_TIMEOUT: int = 50002
    FORWARDING_ERROR: int = 50003


@dataclass(frozen=True)
class SchemaRecord:
    """レジストリから返された登録済みスキーマ。"""

    schema: str
    subject: str
    id: int
    version: int


@dataclass(frozen=True)
class RegistryErrorPayload:
    """レジストリのエラーレスポンス本文。"""

    error_code: int
    message: str


@dataclass
class SchemaRegistryConfig:
    """Schema Registry 接続設定。"""

    url: str
    username: str = ""
    password: str = ""
    timeout_seconds: float = 10.0

    @property
    def base_url(self) -> str:
        """末尾のスラッシュを除いたベース URL。"""
        return self.url.rstrip("/")

    @property
    def auth(self) -> tuple[str, str] | None:
        if self.username and self.password:
            return (self.username, self.password)
        return None
