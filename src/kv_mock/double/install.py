from __future__ import annotations

from dataclasses import dataclass, field

from kv_mock.config.models import MockConfig
from kv_mock.double.instance import KvMock
from kv_mock.integration.kv_store import STORE_OPERATIONS, InMemoryKvStore, KvStore, validate_kv_contract_type

_MISSING = object()


@dataclass(slots=True)
class Installation:
    # Explicit handle returned by install(); restore() needs it to put the originals back.
    target: type[KvStore]
    mock: KvMock
    originals: dict[str, object] = field(default_factory=dict)
    restored: bool = False


def install(mock: KvMock, target: type[KvStore] = InMemoryKvStore) -> Installation:
    # Route every store operation on target through the mock's double.
    validate_kv_contract_type(target)
    installation = Installation(target=target, mock=mock)
    for name in STORE_OPERATIONS:
        installation.originals[name] = target.__dict__.get(name, _MISSING)
        setattr(target, name, _delegate(mock, name))
    mock.emitter.emit("info", "kv_mock.installed", target=target.__qualname__)
    return installation


def restore(installation: Installation) -> None:
    # Put the original operations back; restoring twice is a no-op.
    if installation.restored:
        return
    target = installation.target
    for name, original in installation.originals.items():
        if original is _MISSING:
            delattr(target, name)
        else:
            setattr(target, name, original)
    installation.restored = True
    installation.mock.emitter.emit("info", "kv_mock.restored", target=target.__qualname__)


def mock_kv(config: MockConfig | None = None, *, log_sink: object | None = None) -> KvMock:
    # Fresh mock per test; nothing is shared with earlier instances.
    return KvMock(config=config or MockConfig(), log_sink=log_sink)


def _delegate(mock: KvMock, name: str) -> object:
    operation = getattr(mock.kv, name)

    def _mocked(_self: object, *args: object, **kwargs: object) -> object:
        return operation(*args, **kwargs)

    _mocked.__name__ = name
    _mocked.__qualname__ = f"MockKv.{name}"
    return _mocked
