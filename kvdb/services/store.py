from __future__ import annotations
import asyncio
from typing import Dict, List, Tuple


class KeyValueStore:
    """
    Process-wide key/value mapping shared by every request handler.

    Every access runs under a single asyncio lock, and nothing awaits
    while the lock is held, so readers never see a half-applied update.
    """

    def __init__(self):
        self._data: Dict[str, str] = {}
        self._lock = asyncio.Lock()

    async def get_all(self) -> List[Tuple[str, str]]:
        """Snapshot of all entries in insertion order."""
        async with self._lock:
            return list(self._data.items())

    async def insert(self, key: str, value: str) -> None:
        async with self._lock:
            self._data[key] = value

    async def delete(self, key: str) -> bool:
        """
        Remove an entry.

        Args:
            key: Key to remove

        Returns:
            True if the key was present, False if nothing was removed
        """
        async with self._lock:
            return self._data.pop(key, None) is not None
