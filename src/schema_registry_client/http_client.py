"""Schema Registry HTTP クライアント実装"""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from .client import SchemaRegistryClient
from .codec import (
    decode_schema_document,
    decode_schema_id,
    decode_schema_record,
    decode_subjects,
    decode_versions,
    encode_schema_only,
)
from .exceptions import ResourceError, SchemaRegistryError, SchemaRegistryErrorCodes
from .interpreter import interpret_response
from .models import RegistryErrorCodes, SchemaRecord, SchemaRegistryConfig
from .transport import (
    AsyncHttpExecutor,
    HttpExecutor,
    build_request,
    make_async_client,
    make_sync_client,
)
from .validation import check_schema_version_id

logger = logging.getLogger(__name__)


def _subject_path(subject: str) -> str:
    return f"/subjects/{quote(subject, safe='')}"


def _is_schema_not_found(error: ResourceError) -> bool:
    # 正規 content type で返った 40403 のみ。application/json 経由は対象外
    return (
        error.code == SchemaRegistryErrorCodes.REGISTRY_ERROR
        and error.error_code == RegistryErrorCodes.SCHEMA_NOT_FOUND
    )


class HttpSchemaRegistryClient(SchemaRegistryClient):
    """httpx を使った Schema Registry HTTP クライアント。

    executor / async_executor を渡すとそれを使ってリクエストを送信する。
    省略時は呼び出しごとに SchemaRegistryConfig から httpx クライアントを生成する。
    クライアント自身は状態を持たないため、executor がスレッドセーフであれば
    複数スレッドから共有できる。
    """

    def __init__(
        self,
        config: SchemaRegistryConfig,
        executor: HttpExecutor | None = None,
        async_executor: AsyncHttpExecutor | None = None,
    ) -> None:
        self._config = config
        self._executor = executor
        self._async_executor = async_executor

    def _transport_error(self, method: str, path: str, e: Exception) -> SchemaRegistryError:
        logger.warning(
            "Schema registry request failed",
            extra={"method": method, "path": path, "error": str(e)},
        )
        return SchemaRegistryError(
            code=SchemaRegistryErrorCodes.TRANSPORT_ERROR,
            message=f"{method} {path}: {e}",
            cause=e,
        )

    def _log_response(self, method: str, path: str, resp: httpx.Response) -> None:
        logger.debug(
            "Schema registry response",
            extra={"method": method, "path": path, "status": resp.status_code},
        )

    def _send(self, method: str, path: str, body: bytes | None = None) -> httpx.Response:
        request = build_request(self._config, method, path, body)
        try:
            if self._executor is not None:
                resp = self._executor.send(request)
            else:
                with make_sync_client(self._config) as client:
                    resp = client.send(request)
        except (httpx.HTTPError, OSError) as e:
            raise self._transport_error(method, path, e) from e
        self._log_response(method, path, resp)
        interpret_response(resp, method, path)
        return resp

    async def _send_async(
        self, method: str, path: str, body: bytes | None = None
    ) -> httpx.Response:
        request = build_request(self._config, method, path, body)
        try:
            if self._async_executor is not None:
                resp = await self._async_executor.send(request)
            else:
                async with make_async_client(self._config) as client:
                    resp = await client.send(request)
        except (httpx.HTTPError, OSError) as e:
            raise self._transport_error(method, path, e) from e
        self._log_response(method, path, resp)
        interpret_response(resp, method, path)
        return resp

    def list_subjects(self) -> list[str]:
        resp = self._send("GET", "/subjects")
        return decode_subjects(resp.content)

    async def list_subjects_async(self) -> list[str]:
        resp = await self._send_async("GET", "/subjects")
        return decode_subjects(resp.content)

    def list_versions(self, subject: str) -> list[int]:
        resp = self._send("GET", f"{_subject_path(subject)}/versions")
        return decode_versions(resp.content)

    async def list_versions_async(self, subject: str) -> list[int]:
        resp = await self._send_async("GET", f"{_subject_path(subject)}/versions")
        return decode_versions(resp.content)

    def is_registered(self, subject: str, schema: str) -> tuple[bool, SchemaRecord | None]:
        try:
            resp = self._send("POST", _subject_path(subject), encode_schema_only(schema))
        except ResourceError as e:
            if _is_schema_not_found(e):
                return False, None
            raise
        return True, decode_schema_record(resp.content)

    async def is_registered_async(
        self, subject: str, schema: str
    ) -> tuple[bool, SchemaRecord | None]:
        try:
            resp = await self._send_async(
                "POST", _subject_path(subject), encode_schema_only(schema)
            )
        except ResourceError as e:
            if _is_schema_not_found(e):
                return False, None
            raise
        return True, decode_schema_record(resp.content)

    def register_schema(self, subject: str, schema: str) -> int:
        resp = self._send("POST", f"{_subject_path(subject)}/versions", encode_schema_only(schema))
        return decode_schema_id(resp.content)

    async def register_schema_async(self, subject: str, schema: str) -> int:
        resp = await self._send_async(
            "POST", f"{_subject_path(subject)}/versions", encode_schema_only(schema)
        )
        return decode_schema_id(resp.content)

    def get_schema_by_id(self, schema_id: int) -> str:
        resp = self._send("GET", f"/schemas/ids/{schema_id}")
        return decode_schema_document(resp.content)

    async def get_schema_by_id_async(self, schema_id: int) -> str:
        resp = await self._send_async("GET", f"/schemas/ids/{schema_id}")
        return decode_schema_document(resp.content)

    def get_schema_by_subject(self, subject: str, version: int) -> SchemaRecord:
        check_schema_version_id(version)
        resp = self._send("GET", f"{_subject_path(subject)}/versions/{version}")
        return decode_schema_record(resp.content)

    async def get_schema_by_subject_async(self, subject: str, version: int) -> SchemaRecord:
        check_schema_version_id(version)
        resp = await self._send_async("GET", f"{_subject_path(subject)}/versions/{version}")
        return decode_schema_record(resp.content)

    def get_latest_schema(self, subject: str) -> SchemaRecord:
        resp = self._send("GET", f"{_subject_path(subject)}/versions/latest")
        return decode_schema_record(resp.content)

    async def get_latest_schema_async(self, subject: str) -> SchemaRecord:
        resp = await self._send_async("GET", f"{_subject_path(subject)}/versions/latest")
        return decode_schema_record(resp.content)

    def delete_subject(self, subject: str) -> list[int]:
        resp = self._send("DELETE", _subject_path(subject))
        return decode_versions(resp.content)

    async def delete_subject_async(self, subject: str) -> list[int]:
        resp = await self._send_async("DELETE", _subject_path(subject))
        return decode_versions(resp.content)
