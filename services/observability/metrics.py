from __future__ import annotations

import logging
import time
from collections import defaultdict
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

logger = logging.getLogger(__name__)


@dataclass
class CallMetric:
    integration: str
    status_code: int | None = None
    error: str | None = None
    duration_s: float = 0.0

    @property
    def outcome(self) -> str:
        if self.error:
            return f"error:{self.error}"
        if self.status_code is not None and self.status_code >= 400:
            return f"http_{self.status_code}"
        return "ok"


@dataclass
class CallStats:
    calls: int = 0
    total_s: float = 0.0


# (integration, outcome) -> running totals for this process
_stats: dict[tuple[str, str], CallStats] = defaultdict(CallStats)


@contextmanager
def timing_metric(integration: str) -> Iterator[CallMetric]:
    """
    Time one external call and record its outcome.

    The block may set `status_code` on the yielded metric; an exception
    escaping the block is recorded by type and re-raised.
    """
    metric = CallMetric(integration)
    start = time.perf_counter()
    try:
        yield metric
    except Exception as e:
        metric.error = type(e).__name__
        raise
    finally:
        metric.duration_s = time.perf_counter() - start
        stats = _stats[(integration, metric.outcome)]
        stats.calls += 1
        stats.total_s += metric.duration_s
        logger.debug(
            "[METRIC] %s outcome=%s took %.3fs", integration, metric.outcome, metric.duration_s
        )


def call_stats() -> dict[tuple[str, str], CallStats]:
    return {k: CallStats(v.calls, v.total_s) for k, v in _stats.items()}


def reset_call_stats() -> None:
    _stats.clear()
