"""レスポンスの content type とステータスからエラーを判定する"""

from __future__ import annotations

import httpx

from .codec import decode_registry_error
from .exceptions import ResourceError, SchemaRegistryError, SchemaRegistryErrorCodes
from .models import CONTENT_TYPE_JSON, SCHEMA_REGISTRY_CONTENT_TYPES


def media_type(response: httpx.Response) -> str:
    """Content-Type ヘッダからパラメータを除いたメディアタイプを小文字で返す。"""
    raw = response.headers.get("Content-Type", "")
    return raw.split(";", 1)[0].strip().lower()


def is_success(response: httpx.Response) -> bool:
    return 200 <= response.status_code < 300


def interpret_response(response: httpx.Response, method: str, path: str) -> None:
    """レジストリのレスポンスを分類し、成功でなければ例外を送出する。

    成功とみなすのは正規の schema registry content type かつ 2xx の場合のみ。

    - 正規 content type で 2xx 以外: 本文を {error_code, message} として
      デコードし、method / path 付きの ResourceError (REGISTRY_ERROR) を送出する。
    - application/json: ステータスに関わらず成功とはみなさない。本文が
      エラーペイロードとして読めれば method / path なしの ResourceError
      (UNEXPECTED_CONTENT_TYPE) を送出する。
    - それ以外の content type、または本文が読めない場合: レジストリの
      error_code を持たない SchemaRegistryError を送出する。
    """
    content_type = media_type(response)

    if content_type in SCHEMA_REGISTRY_CONTENT_TYPES:
        if is_success(response):
            return
        payload = decode_registry_error(response.content)
        raise ResourceError(
            code=SchemaRegistryErrorCodes.REGISTRY_ERROR,
            error_code=payload.error_code,
            message=payload.message,
            method=method,
            path=path,
        )

    if content_type == CONTENT_TYPE_JSON:
        try:
            payload = decode_registry_error(response.content)
        except SchemaRegistryError as e:
            raise SchemaRegistryError(
                code=SchemaRegistryErrorCodes.UNEXPECTED_CONTENT_TYPE,
                message=(
                    f"{method} {path}: HTTP {response.status_code} "
                    f"with content type {CONTENT_TYPE_JSON!r} and unreadable body"
                ),
                cause=e,
            ) from e
        raise ResourceError(
            code=SchemaRegistryErrorCodes.UNEXPECTED_CONTENT_TYPE,
            error_code=payload.error_code,
            message=payload.message,
        )

    raise SchemaRegistryError(
        code=SchemaRegistryErrorCodes.UNEXPECTED_CONTENT_TYPE,
        message=(
            f"{method} {path}: HTTP {response.status_code} "
            f"with unexpected content type {content_type or '(none)'!r}"
        ),
    )
