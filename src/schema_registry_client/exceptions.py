"""schema_registry_client の例外型定義"""

from __future__ import annotations


class SchemaRegistryError(Exception):
    """schema_registry_client のエラー基底クラス。"""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class SchemaRegistryErrorCodes:
    """SchemaRegistryError のエラーコード定数。"""

    TRANSPORT_ERROR: str = "TRANSPORT_ERROR"
    DECODE_ERROR: str = "DECODE_ERROR"
    REGISTRY_ERROR: str = "REGISTRY_ERROR"
    UNEXPECTED_CONTENT_TYPE: str = "UNEXPECTED_CONTENT_TYPE"
    INVALID_VERSION_ID: str = "INVALID_VERSION_ID"


class ResourceError(SchemaRegistryError):
    """レジストリが返したエラーペイロード (error_code, message) を保持するエラー。

    error_code はレジストリの値をそのまま保持する。method / path は
    正規の content type で返ってきた場合のみ設定される。
    """

    def __init__(
        self,
        code: str,
        error_code: int,
        message: str,
        method: str = "",
        path: str = "",
    ) -> None:
        super().__init__(code=code, message=message)
        self.error_code = error_code
        self.message = message
        self.method = method
        self.path = path

    def __str__(self) -> str:
        return (
            f"client: ({self.method}: {self.path}) "
            f"failed with error code {self.error_code} {self.message.lstrip()}"
        )
