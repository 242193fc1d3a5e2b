# Record/stub/verify test double for a key-value store.
#
#   mock = mock_kv()
#   mock.when.get(["user", 1]).then_return(entry)
#   service = UserService(mock.kv)
#   ...
#   mock.verify.once().get(["user", 1])
#   mock.verify.no_more_interactions()

from kv_mock.config import ConfigError, MockConfig, load_mock_config
from kv_mock.domain import KvCommitResult, KvEntry, KvEntryMaybe
from kv_mock.double import Installation, KvMock, MockKv, MockKvListIterator, MockListing, install, mock_kv, restore
from kv_mock.integration import InMemoryKvStore, KvStore
from kv_mock.matching import (
    Matcher,
    MultiKey,
    any_bigint,
    any_boolean,
    any_bytes,
    any_consistency_level,
    any_key,
    any_list_selector,
    any_number,
    any_string,
    any_value,
    eq,
    key_parts,
    matches_list_selector,
    matches_object,
)
from kv_mock.stubbing import ResultSequencer, WhenKv
from kv_mock.verification import AssertKv, KvAssertionError

__all__ = [
    "AssertKv",
    "ConfigError",
    "InMemoryKvStore",
    "Installation",
    "KvAssertionError",
    "KvCommitResult",
    "KvEntry",
    "KvEntryMaybe",
    "KvMock",
    "KvStore",
    "Matcher",
    "MockConfig",
    "MockKv",
    "MockKvListIterator",
    "MockListing",
    "MultiKey",
    "ResultSequencer",
    "WhenKv",
    "any_bigint",
    "any_boolean",
    "any_bytes",
    "any_consistency_level",
    "any_key",
    "any_list_selector",
    "any_number",
    "any_string",
    "any_value",
    "eq",
    "install",
    "key_parts",
    "load_mock_config",
    "matches_list_selector",
    "matches_object",
    "mock_kv",
    "restore",
]
