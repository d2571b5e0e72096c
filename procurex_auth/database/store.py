"""
Key-value store used to persist the authorization model.

Expected Supabase table structure (SupabaseStore):

kv_store:
- key: text (primary key) - e.g., "tenants", "users", "roles"
- value: jsonb (not null) - ordered array of records
- updated_at: timestamp (default: now())
"""

import json
import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, List, Optional

from supabase import Client

from procurex_auth.config.settings import settings
from procurex_auth.core.exceptions import StoreError
from procurex_auth.database.supabase_client import get_supabase

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """get/set-by-name store holding ordered sequences of JSON-compatible records"""

    @abstractmethod
    def get(self, key: str) -> Optional[List[Any]]:
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, value: List[Any]) -> None:
        raise NotImplementedError

    def has(self, key: str) -> bool:
        return self.get(key) is not None


class InMemoryStore(KeyValueStore):
    """Process-local store. Values are held as JSON text so every read is an independent copy."""

    def __init__(self):
        self._lock = threading.Lock()
        self._data: dict[str, str] = {}

    def get(self, key: str) -> Optional[List[Any]]:
        with self._lock:
            raw = self._data.get(key)
        if raw is None:
            return None
        return json.loads(raw)

    def set(self, key: str, value: List[Any]) -> None:
        raw = json.dumps(value)
        with self._lock:
            self._data[key] = raw
        logger.debug(f"Stored {len(value)} record(s) under {key}")

    def has(self, key: str) -> bool:
        with self._lock:
            return key in self._data

    def raw(self, key: str) -> Optional[str]:
        """Serialized form of a key, as it would be written to disk or the wire"""
        with self._lock:
            return self._data.get(key)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()


class SupabaseStore(KeyValueStore):
    """One row per key in a Supabase table"""

    def __init__(self, supabase: Client, table: Optional[str] = None):
        self.supabase = supabase
        self.table = table or settings.store_table

    def get(self, key: str) -> Optional[List[Any]]:
        try:
            result = self.supabase.table(self.table)\
                .select("value")\
                .eq("key", key)\
                .execute()
        except Exception as e:
            raise StoreError(f"Failed to read {key}: {e}") from e

        if not result.data:
            return None
        return result.data[0]["value"]

    def set(self, key: str, value: List[Any]) -> None:
        try:
            self.supabase.table(self.table)\
                .upsert({"key": key, "value": value})\
                .execute()
        except Exception as e:
            raise StoreError(f"Failed to write {key}: {e}") from e
        logger.debug(f"Stored {len(value)} record(s) under {key}")


_memory_store: Optional[InMemoryStore] = None


def get_store() -> KeyValueStore:
    """Store selected by settings.store_backend"""
    global _memory_store
    if settings.uses_supabase:
        return SupabaseStore(get_supabase())
    if _memory_store is None:
        _memory_store = InMemoryStore()
    return _memory_store
