"""In-memory ApplicationFileAccessor.

Stands in for the application definition file when embedding projprops
without a project on disk, and in tests.
"""

from __future__ import annotations

import asyncio


class InMemoryApplicationFileAccessor:
    """Holds StartupURI and ShutdownMode values in memory.

    A write loads the file revision, yields to the event loop the way a real
    save would, then stores the value and the next revision. The asyncio.Lock
    keeps concurrent writers from saving over each other's revision.
    `reads` counts accessor reads; `writes` is the file revision.
    """

    def __init__(self, startup_uri: str | None = None, shutdown_mode: str | None = None):
        self._values = {"startup_uri": startup_uri, "shutdown_mode": shutdown_mode}
        self._lock = asyncio.Lock()
        self.reads = 0
        self.writes = 0

    async def get_startup_uri(self) -> str | None:
        self.reads += 1
        return self._values["startup_uri"]

    async def set_startup_uri(self, value: str) -> None:
        await self._save("startup_uri", value)

    async def get_shutdown_mode(self) -> str | None:
        self.reads += 1
        return self._values["shutdown_mode"]

    async def set_shutdown_mode(self, value: str) -> None:
        await self._save("shutdown_mode", value)

    async def _save(self, key: str, value: str) -> None:
        async with self._lock:
            revision = self.writes
            await asyncio.sleep(0)
            self._values[key] = value
            self.writes = revision + 1
