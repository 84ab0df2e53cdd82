"""Append-only access log written off the request path.

Each request produces one line ``<ISO-8601 timestamp> - <METHOD> <PATH>``.
Writes run in a worker thread scheduled on the event loop, so a slow or
failing disk never delays a response. Failures go to the application
logger and are otherwise dropped.
"""

import asyncio
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional, Set

from fastapi import Request


logger = logging.getLogger(__name__)


def format_line(method: str, path: str, when: Optional[datetime] = None) -> str:
    when = when or datetime.now(timezone.utc)
    stamp = when.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return f"{stamp} - {method} {path}\n"


class AccessLog:
    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._pending: Set[asyncio.Task] = set()

    def _append(self, line: str) -> None:
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(line)

    async def _write(self, line: str) -> None:
        try:
            await asyncio.to_thread(self._append, line)
        except OSError as e:
            logger.error(f"Failed to write access log {self.path}: {e}")

    def submit(self, line: str) -> None:
        task = asyncio.get_running_loop().create_task(self._write(line))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def drain(self) -> None:
        if self._pending:
            await asyncio.gather(*list(self._pending))


async def access_log_middleware(request: Request, call_next: Callable):
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"
    request.app.state.access_log.submit(format_line(request.method, target))
    return await call_next(request)
