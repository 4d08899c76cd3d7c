"""リクエスト/レスポンス本文の JSON エンコード・デコード"""

from __future__ import annotations

import json
from typing import Any

from .exceptions import SchemaRegistryError, SchemaRegistryErrorCodes
from .models import RegistryErrorPayload, SchemaRecord


def _decode_error(message: str, cause: Exception | None = None) -> SchemaRegistryError:
    return SchemaRegistryError(
        code=SchemaRegistryErrorCodes.DECODE_ERROR,
        message=message,
        cause=cause,
    )


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _load(body: bytes) -> Any:
    try:
        return json.loads(body)
    except (ValueError, UnicodeDecodeError) as e:
        raise _decode_error(f"invalid JSON body: {e}", cause=e) from e


def _load_object(body: bytes, shape: str) -> dict[str, Any]:
    data = _load(body)
    if not isinstance(data, dict):
        raise _decode_error(f"expected {shape} object, got {type(data).__name__}")
    return data


def _require(data: dict[str, Any], key: str, expected: type, shape: str) -> Any:
    if key not in data:
        raise _decode_error(f"{shape}: missing field {key!r}")
    value = data[key]
    if expected is int:
        ok = _is_int(value)
    else:
        ok = isinstance(value, expected)
    if not ok:
        raise _decode_error(
            f"{shape}: field {key!r} must be {expected.__name__}, got {type(value).__name__}"
        )
    return value


def encode_schema_only(schema: str) -> bytes:
    """{"schema": <document>} のみを持つ本文を生成する。"""
    return json.dumps({"schema": schema}).encode("utf-8")


def decode_subjects(body: bytes) -> list[str]:
    data = _load(body)
    if not isinstance(data, list) or not all(isinstance(s, str) for s in data):
        raise _decode_error("expected a JSON array of subject names")
    return list(data)


def decode_versions(body: bytes) -> list[int]:
    data = _load(body)
    if not isinstance(data, list) or not all(_is_int(v) for v in data):
        raise _decode_error("expected a JSON array of integer versions")
    return list(data)


def decode_schema_record(body: bytes) -> SchemaRecord:
    """{schema, subject, id, version} を SchemaRecord にデコードする。"""
    data = _load_object(body, "schema record")
    return SchemaRecord(
        schema=_require(data, "schema", str, "schema record"),
        subject=_require(data, "subject", str, "schema record"),
        id=_require(data, "id", int, "schema record"),
        version=_require(data, "version", int, "schema record"),
    )


def decode_schema_id(body: bytes) -> int:
    data = _load_object(body, "schema id")
    value: int = _require(data, "id", int, "schema id")
    return value


def decode_schema_document(body: bytes) -> str:
    data = _load_object(body, "schema")
    value: str = _require(data, "schema", str, "schema")
    return value


def decode_registry_error(body: bytes) -> RegistryErrorPayload:
    """{error_code, message} を RegistryErrorPayload にデコードする。"""
    data = _load_object(body, "registry error")
    return RegistryErrorPayload(
        error_code=_require(data, "error_code", int, "registry error"),
        message=_require(data, "message", str, "registry error"),
    )
