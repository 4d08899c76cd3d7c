"""HTTP エグゼキュータ抽象とリクエスト組み立て"""

from __future__ import annotations

from typing import Protocol

import httpx

from .models import (
    CONTENT_TYPE_JSON,
    CONTENT_TYPE_SCHEMA_JSON,
    CONTENT_TYPE_SCHEMA_JSON_UNVERSIONED,
    SchemaRegistryConfig,
)

ACCEPT_HEADER = ", ".join(
    [CONTENT_TYPE_SCHEMA_JSON, CONTENT_TYPE_SCHEMA_JSON_UNVERSIONED, CONTENT_TYPE_JSON]
)


class HttpExecutor(Protocol):
    """1 リクエストを実行して 1 レスポンスを返すプロトコル。

    httpx.Client はそのままこのプロトコルを満たす。
    """

    def send(self, request: httpx.Request) -> httpx.Response: ...


class AsyncHttpExecutor(Protocol):
    """HttpExecutor の非同期版。httpx.AsyncClient が満たす。"""

    async def send(self, request: httpx.Request) -> httpx.Response: ...


def build_request(
    config: SchemaRegistryConfig,
    method: str,
    path: str,
    body: bytes | None = None,
) -> httpx.Request:
    """ベース URL とパスから絶対 URL のリクエストを組み立てる。"""
    headers = {"Accept": ACCEPT_HEADER}
    if body is not None:
        headers["Content-Type"] = CONTENT_TYPE_SCHEMA_JSON
    return httpx.Request(method, f"{config.base_url}{path}", headers=headers, content=body)


def make_sync_client(config: SchemaRegistryConfig) -> httpx.Client:
    return httpx.Client(auth=config.auth, timeout=config.timeout_seconds)


def make_async_client(config: SchemaRegistryConfig) -> httpx.AsyncClient:
    return httpx.AsyncClient(auth=config.auth, timeout=config.timeout_seconds)
