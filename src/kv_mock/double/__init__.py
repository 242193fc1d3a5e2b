from .install import Installation, install, mock_kv, restore
from .instance import KvMock
from .listing import MockKvListIterator, MockListing
from .mock import MockKv

__all__ = [
    "Installation",
    "KvMock",
    "MockKv",
    "MockKvListIterator",
    "MockListing",
    "install",
    "mock_kv",
    "restore",
]
