"""Background event loop for running async fetch routines from sync code."""

from __future__ import annotations

import asyncio
import threading
from collections.abc import Awaitable
from typing import Any


class SyncRunner:
    """Thread-safe async runner for sync contexts. Singleton per process.

    Awaitables run on a dedicated loop thread, so sync callers work whether or
    not their own thread is already running an event loop.
    """

    _instance: SyncRunner | None = None
    _lock = threading.Lock()

    def __init__(self) -> None:
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread: threading.Thread | None = None

    @classmethod
    def get(cls) -> SyncRunner:
        """Get the singleton SyncRunner instance, creating it if necessary."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    inst = cls()
                    inst._start()
                    cls._instance = inst
        return cls._instance

    def _start(self) -> None:
        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(
            target=self._loop.run_forever,
            daemon=True,
            name="relayid-sync-runner",
        )
        self._thread.start()

    def run(self, awaitable: Awaitable[Any]) -> Any:
        """Run an awaitable on the background loop, blocking until complete."""
        if self._loop is None:
            raise RuntimeError("Runner not initialized")
        future = asyncio.run_coroutine_threadsafe(_await(awaitable), self._loop)
        return future.result()


async def _await(awaitable: Awaitable[Any]) -> Any:
    return await awaitable
