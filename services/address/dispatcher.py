from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class QueryDispatcher:
    """
    Hands out a monotonically increasing sequence token per query.

    A response is only delivered if its token is still the latest one when it
    arrives; anything older returns None. With `debounce_s` set, a query waits
    that long first and is dropped without running if a newer one was issued.
    """

    def __init__(self, debounce_s: float = 0.0):
        self.debounce_s = debounce_s
        self._seq = 0

    @property
    def latest(self) -> int:
        return self._seq

    def issue(self) -> int:
        self._seq += 1
        return self._seq

    def cancel(self) -> None:
        """Invalidate whatever is in flight."""
        self.issue()

    def is_current(self, token: int) -> bool:
        return token == self._seq

    async def dispatch(self, query: Callable[[], Awaitable[T]]) -> T | None:
        token = self.issue()
        if self.debounce_s > 0:
            await asyncio.sleep(self.debounce_s)
            if not self.is_current(token):
                return None
        result = await query()
        if not self.is_current(token):
            logger.debug("dropping stale response #%d (latest #%d)", token, self._seq)
            return None
        return result
