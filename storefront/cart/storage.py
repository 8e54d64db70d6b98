"""
Cart snapshot storage.

The cart aggregate writes its serialized form through a CartStore after
every mutation. Adapters hold one JSON string per key; none of them lock,
so two sessions sharing a key simply overwrite each other.
"""
import asyncio
import re
from pathlib import Path
from typing import Optional, Protocol

from storefront import config
from storefront.db import TTL, get_redis
from storefront.logging import get_logger

logger = get_logger(__name__)

_SAFE_KEY = re.compile(r"[^A-Za-z0-9_.-]")


class CartStore(Protocol):
    """Save-port for cart snapshots."""

    async def get(self, key: str) -> Optional[str]: ...

    async def set(self, key: str, value: str) -> None: ...

    async def delete(self, key: str) -> None: ...


class MemoryCartStore:
    """Process-local store. Default for development and tests."""

    def __init__(self):
        self._data: dict[str, str] = {}

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data


class FileCartStore:
    """One JSON file per key under a directory."""

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{_SAFE_KEY.sub('_', key)}.json"

    def _read(self, path: Path) -> Optional[str]:
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def _write(self, path: Path, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(".tmp")
        tmp.write_text(value, encoding="utf-8")
        tmp.replace(path)

    async def get(self, key: str) -> Optional[str]:
        return await asyncio.to_thread(self._read, self._path(key))

    async def set(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._write, self._path(key), value)

    async def delete(self, key: str) -> None:
        await asyncio.to_thread(self._path(key).unlink, True)


class RedisCartStore:
    """Upstash Redis store; snapshots expire after TTL.CART seconds."""

    def __init__(self, redis=None, ttl: int = TTL.CART):
        self._redis = redis  # Lazy initialization
        self.ttl = ttl

    @property
    def redis(self):
        if self._redis is None:
            try:
                self._redis = get_redis()
            except ValueError as e:
                raise ValueError(f"Redis not available: {e}") from e
        return self._redis

    async def get(self, key: str) -> Optional[str]:
        return await self.redis.get(key)

    async def set(self, key: str, value: str) -> None:
        await self.redis.set(key, value, ex=self.ttl)

    async def delete(self, key: str) -> None:
        await self.redis.delete(key)


def create_cart_store(backend: Optional[str] = None) -> CartStore:
    """Build the store selected by CART_STORAGE (memory, file or redis)."""
    backend = (backend or config.CART_STORAGE).lower()
    if backend == "memory":
        return MemoryCartStore()
    if backend == "file":
        return FileCartStore(config.CART_STORAGE_PATH)
    if backend == "redis":
        return RedisCartStore()
    raise ValueError(f"Unknown CART_STORAGE backend: {backend}")
