from __future__ import annotations

import asyncio
from typing import Any, Protocol

from .store import Store
from .values import Document


class AsyncDocumentRepository(Protocol):
    async def get(self, path: str, default: Any = None) -> Any: ...
    async def has(self, path: str) -> bool: ...
    async def all(self) -> Document: ...

    async def set(self, path: str, value: Any) -> Any: ...
    async def delete(self, path: str) -> bool: ...
    async def delete_all(self) -> bool: ...

    async def push(self, path: str, value: Any) -> list[Any]: ...
    async def unpush(self, path: str, value: Any) -> list[Any]: ...
    async def set_by_priority(self, path: str, value: Any, priority: int) -> list[Any]: ...
    async def del_by_priority(self, path: str, priority: int) -> list[Any]: ...


class AsyncStore(AsyncDocumentRepository):
    """
    Async wrapper around Store.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O;
    the store's own lock keeps concurrent calls from interleaving.
    """

    def __init__(self, store: Store) -> None:
        self._store = store

    @classmethod
    async def open(cls, **options: Any) -> "AsyncStore":
        return cls(await asyncio.to_thread(Store, **options))

    @property
    def store(self) -> Store:
        return self._store

    async def get(self, path: str, default: Any = None) -> Any:
        return await asyncio.to_thread(self._store.get, path, default)

    async def fetch(self, path: str, default: Any = None) -> Any:
        return await asyncio.to_thread(self._store.fetch, path, default)

    async def has(self, path: str) -> bool:
        return await asyncio.to_thread(self._store.has, path)

    async def all(self) -> Document:
        return await asyncio.to_thread(self._store.all)

    async def set(self, path: str, value: Any) -> Any:
        return await asyncio.to_thread(self._store.set, path, value)

    async def delete(self, path: str) -> bool:
        return await asyncio.to_thread(self._store.delete, path)

    async def delete_all(self) -> bool:
        return await asyncio.to_thread(self._store.delete_all)

    async def push(self, path: str, value: Any) -> list[Any]:
        return await asyncio.to_thread(self._store.push, path, value)

    async def unpush(self, path: str, value: Any) -> list[Any]:
        return await asyncio.to_thread(self._store.unpush, path, value)

    async def set_by_priority(self, path: str, value: Any, priority: int) -> list[Any]:
        return await asyncio.to_thread(self._store.set_by_priority, path, value, priority)

    async def del_by_priority(self, path: str, priority: int) -> list[Any]:
        return await asyncio.to_thread(self._store.del_by_priority, path, priority)

    async def aclose(self) -> None:
        await asyncio.to_thread(self._store.close)
