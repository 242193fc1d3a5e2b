# Integration package: the store port the double stands in for, plus its reference adapter.

from kv_mock.integration.kv_store import (
    STORE_OPERATIONS,
    InMemoryKvStore,
    KvStore,
    KvStoreClosedError,
    validate_kv_contract_type,
)
from kv_mock.integration.list_iterator import KvListIterator

__all__ = [
    "STORE_OPERATIONS",
    "InMemoryKvStore",
    "KvListIterator",
    "KvStore",
    "KvStoreClosedError",
    "validate_kv_contract_type",
]
