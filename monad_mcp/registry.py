"""Static tool registry: populated once at startup, frozen before serving."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Dict, Iterator, List, Mapping, Optional

from monad_mcp.outcome import Outcome
from monad_mcp.schema import ParamSpec, build_input_schema

ToolHandler = Callable[..., Awaitable[Outcome]]


class DuplicateToolError(Exception):
    """Raised when a tool name is registered twice."""


class RegistryFrozenError(Exception):
    """Raised when registering after the registry has been frozen."""


@dataclass(frozen=True, slots=True)
class ToolDefinition:
    name: str
    description: str
    params: Mapping[str, ParamSpec]
    handler: ToolHandler
    input_schema: Dict[str, Any] = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))
        object.__setattr__(self, "input_schema", build_input_schema(self.params))

    def handler_kwargs(self, values: Mapping[str, Any]) -> Dict[str, Any]:
        """Rename validated wire-level argument names to handler keywords."""
        return {(self.params[name].kwarg or name): value for name, value in values.items()}

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


class ToolRegistry:
    """Ordered name -> ToolDefinition mapping."""

    def __init__(self) -> None:
        self._tools: Dict[str, ToolDefinition] = {}
        self._frozen = False

    def register(
        self,
        name: str,
        description: str,
        params: Mapping[str, ParamSpec],
        handler: ToolHandler,
    ) -> ToolDefinition:
        if self._frozen:
            raise RegistryFrozenError(f"Cannot register {name!r}: registry is frozen")
        if name in self._tools:
            raise DuplicateToolError(f"Tool already registered: {name}")
        tool = ToolDefinition(name=name, description=description, params=params, handler=handler)
        self._tools[name] = tool
        return tool

    def freeze(self) -> "ToolRegistry":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def lookup(self, name: str) -> Optional[ToolDefinition]:
        return self._tools.get(name)

    def names(self) -> List[str]:
        return list(self._tools)

    def __iter__(self) -> Iterator[ToolDefinition]:
        return iter(list(self._tools.values()))

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools
