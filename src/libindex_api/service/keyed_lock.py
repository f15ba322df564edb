"""Per-key asyncio exclusion for query-then-write sequences."""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import AsyncIterator, Hashable

LOGGER = logging.getLogger(__name__)


@dataclass
class _Entry:
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    holders: int = 0


class KeyedLock:
    """Lock table keyed by reference; entries are dropped once nobody waits on them."""

    def __init__(self, *, warn_size: int = 1024) -> None:
        self._entries: dict[Hashable, _Entry] = {}
        self._warn_size = warn_size

    def __len__(self) -> int:
        return len(self._entries)

    def locked(self, key: Hashable) -> bool:
        entry = self._entries.get(key)
        return entry is not None and entry.lock.locked()

    @asynccontextmanager
    async def hold(self, key: Hashable) -> AsyncIterator[None]:
        entry = self._entries.get(key)
        if entry is None:
            entry = _Entry()
            self._entries[key] = entry
            if len(self._entries) == self._warn_size:
                LOGGER.warning("Reference lock table reached %d entries", self._warn_size)
        entry.holders += 1
        try:
            async with entry.lock:
                yield
        finally:
            entry.holders -= 1
            if entry.holders == 0 and self._entries.get(key) is entry:
                del self._entries[key]
