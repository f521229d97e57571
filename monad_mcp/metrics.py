"""In-process tool call counters (per process; not aggregated across workers)."""

from __future__ import annotations

from collections import Counter, deque
from threading import Lock
from typing import Deque, Dict, Optional

DEFAULT_RECENT_CALLS = 100


class MetricsRecorder:
    """Per-tool success/error counts plus a bounded window of recent call timings."""

    def __init__(self, max_recent: int = DEFAULT_RECENT_CALLS) -> None:
        self._lock = Lock()
        self._tool_success: Counter[str] = Counter()
        self._tool_error: Counter[str] = Counter()
        self._failure_kinds: Counter[str] = Counter()
        self._recent: Deque[Dict[str, object]] = deque(maxlen=max_recent)

    def record_tool(
        self,
        tool: str,
        *,
        success: bool,
        kind: Optional[str] = None,
        duration_ms: Optional[float] = None,
    ) -> None:
        with self._lock:
            if success:
                self._tool_success[tool] += 1
            else:
                self._tool_error[tool] += 1
                if kind:
                    self._failure_kinds[kind] += 1
            if duration_ms is not None:
                self._recent.append(
                    {"tool": tool, "success": success, "duration_ms": round(duration_ms, 2)}
                )

    def snapshot(self) -> Dict[str, object]:
        with self._lock:
            return {
                "tool_success": dict(self._tool_success),
                "tool_error": dict(self._tool_error),
                "failure_kinds": dict(self._failure_kinds),
                "recent_calls": list(self._recent),
            }

    def reset(self) -> None:
        with self._lock:
            self._tool_success.clear()
            self._tool_error.clear()
            self._failure_kinds.clear()
            self._recent.clear()


default_metrics = MetricsRecorder()
