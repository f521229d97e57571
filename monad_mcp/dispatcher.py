"""
Tool dispatch: lookup, validation, invocation, and envelope wrapping.

``Dispatcher.dispatch`` never raises. Unknown tools, invalid arguments, and
anything a handler lets escape are converted to Failure outcomes before the
envelope is built.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, List, Optional

from monad_mcp.metrics import MetricsRecorder, default_metrics
from monad_mcp.outcome import Failure, FailureKind, Outcome, Success, error_detail, to_envelope
from monad_mcp.registry import ToolRegistry
from monad_mcp.schema import validate

logger = logging.getLogger(__name__)


class Dispatcher:
    """Route (tool name, arguments) pairs to registered handlers."""

    def __init__(
        self,
        registry: ToolRegistry,
        client: Any,
        *,
        metrics: MetricsRecorder = default_metrics,
    ) -> None:
        self.registry = registry
        self.client = client
        self.metrics = metrics

    def list_tools(self) -> List[Dict[str, Any]]:
        """Return tool descriptors in registration order."""
        return [tool.describe() for tool in self.registry]

    async def execute(self, tool_name: str, arguments: Optional[Dict[str, Any]] = None) -> Outcome:
        started = time.perf_counter()
        tool = self.registry.lookup(tool_name) if isinstance(tool_name, str) else None
        if tool is None:
            outcome: Outcome = Failure(f"Unknown tool: {tool_name}", FailureKind.UNKNOWN_TOOL)
            self._record(str(tool_name), outcome, started)
            return outcome

        checked = validate(tool.params, arguments)
        if not checked.ok:
            outcome = Failure(
                f"Invalid arguments for {tool_name}: {checked.describe()}", FailureKind.VALIDATION
            )
            self._record(tool_name, outcome, started)
            return outcome

        try:
            result = await tool.handler(**tool.handler_kwargs(checked.values), client=self.client)
        except Exception as exc:
            logger.exception("Unhandled error in tool %s", tool_name)
            outcome = Failure(
                f"Unexpected error while calling {tool_name}: {error_detail(exc)}",
                FailureKind.UNEXPECTED,
            )
        else:
            if isinstance(result, (Success, Failure)):
                outcome = result
            elif isinstance(result, str):
                outcome = Success(result)
            else:
                outcome = Failure(
                    f"Unexpected result from {tool_name}.", FailureKind.UNEXPECTED
                )

        self._record(tool_name, outcome, started)
        return outcome

    async def dispatch(
        self, tool_name: str, arguments: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Run a tool and return its response envelope."""
        outcome = await self.execute(tool_name, arguments)
        return to_envelope(outcome)

    def _record(self, tool_name: str, outcome: Outcome, started: float) -> None:
        duration_ms = (time.perf_counter() - started) * 1000
        if isinstance(outcome, Failure):
            logger.warning(
                "tool=%s outcome=error kind=%s",
                tool_name,
                outcome.kind.value,
                extra={"tool": tool_name, "error": outcome.kind.value},
            )
            self.metrics.record_tool(
                tool_name, success=False, kind=outcome.kind.value, duration_ms=duration_ms
            )
        else:
            logger.info(
                "tool=%s outcome=success",
                tool_name,
                extra={"tool": tool_name},
            )
            self.metrics.record_tool(tool_name, success=True, duration_ms=duration_ms)
