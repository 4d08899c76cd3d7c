"""schema_registry_client library."""

from .client import SchemaRegistryClient
from .exceptions import ResourceError, SchemaRegistryError, SchemaRegistryErrorCodes
from .http_client import HttpSchemaRegistryClient
from .models import (
    CONTENT_TYPE_JSON,
    CONTENT_TYPE_SCHEMA_JSON,
    RegistryErrorCodes,
    RegistryErrorPayload,
    SchemaRecord,
    SchemaRegistryConfig,
)
from .transport import AsyncHttpExecutor, HttpExecutor
from .validation import check_schema_version_id

__all__ = [
    "SchemaRegistryClient",
    "HttpSchemaRegistryClient",
    "HttpExecutor",
    "AsyncHttpExecutor",
    "SchemaRecord",
    "RegistryErrorPayload",
    "SchemaRegistryConfig",
    "RegistryErrorCodes",
    "CONTENT_TYPE_SCHEMA_JSON",
    "CONTENT_TYPE_JSON",
    "SchemaRegistryError",
    "SchemaRegistryErrorCodes",
    "ResourceError",
    "check_schema_version_id",
]
