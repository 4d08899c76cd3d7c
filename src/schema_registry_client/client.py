"""Schema Registry クライアント抽象基底クラス"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .models import SchemaRecord


class SchemaRegistryClient(ABC):
    """Schema Registry クライアント抽象基底クラス。

    失敗はすべて SchemaRegistryError (またはそのサブクラス) として送出される。
    """

    @abstractmethod
    def list_subjects(self) -> list[str]:
        """登録済み subject の一覧を取得する。"""
        ...

    @abstractmethod
    async def list_subjects_async(self) -> list[str]:
        """非同期で登録済み subject の一覧を取得する。"""
        ...

    @abstractmethod
    def list_versions(self, subject: str) -> list[int]:
        """subject のバージョン一覧を取得する。"""
        ...

    @abstractmethod
    async def list_versions_async(self, subject: str) -> list[int]:
        """非同期で subject のバージョン一覧を取得する。"""
        ...

    @abstractmethod
    def is_registered(self, subject: str, schema: str) -> tuple[bool, SchemaRecord | None]:
        """スキーマが subject に登録済みかを確認する。

        未登録 (error_code 40403) はエラーではなく (False, None) で返す。
        """
        ...

    @abstractmethod
    async def is_registered_async(
        self, subject: str, schema: str
    ) -> tuple[bool, SchemaRecord | None]:
        """非同期でスキーマが subject に登録済みかを確認する。"""
        ...

    @abstractmethod
    def register_schema(self, subject: str, schema: str) -> int:
        """スキーマを登録してスキーマ ID を返す。"""
        ...

    @abstractmethod
    async def register_schema_async(self, subject: str, schema: str) -> int:
        """非同期でスキーマを登録してスキーマ ID を返す。"""
        ...

    @abstractmethod
    def get_schema_by_id(self, schema_id: int) -> str:
        """ID でスキーマ本文を取得する。"""
        ...

    @abstractmethod
    async def get_schema_by_id_async(self, schema_id: int) -> str:
        """非同期で ID でスキーマ本文を取得する。"""
        ...

    @abstractmethod
    def get_schema_by_subject(self, subject: str, version: int) -> SchemaRecord:
        """subject とバージョンでスキーマを取得する。"""
        ...

    @abstractmethod
    async def get_schema_by_subject_async(self, subject: str, version: int) -> SchemaRecord:
        """非同期で subject とバージョンでスキーマを取得する。"""
        ...

    @abstractmethod
    def get_latest_schema(self, subject: str) -> SchemaRecord:
        """subject の最新スキーマを取得する。"""
        ...

    @abstractmethod
    async def get_latest_schema_async(self, subject: str) -> SchemaRecord:
        """非同期で subject の最新スキーマを取得する。"""
        ...

    @abstractmethod
    def delete_subject(self, subject: str) -> list[int]:
        """subject を削除し、削除されたバージョン一覧を返す。"""
        ...

    @abstractmethod
    async def delete_subject_async(self, subject: str) -> list[int]:
        """非同期で subject を削除し、削除されたバージョン一覧を返す。"""
        ...
