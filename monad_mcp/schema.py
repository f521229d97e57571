"""
Declarative parameter schemas and the generic validator that consumes them.

Validation here is structural only: presence, JSON type, and an optional
format pattern. Semantic checks (address checksums, whether an amount parses as
a decimal) are left to the handlers and the chain client.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

_TYPE_LABELS = {
    "string": "a string",
    "integer": "an integer",
    "number": "a number",
    "boolean": "a boolean",
}


@dataclass(frozen=True, slots=True)
class ParamSpec:
    """Shape of a single tool parameter."""

    type: str
    description: str = ""
    optional: bool = False
    pattern: Optional[str] = None
    pattern_label: Optional[str] = None
    # Secret values are never echoed back in validation messages.
    secret: bool = False
    # Python keyword the handler receives, when it differs from the wire name.
    kwarg: Optional[str] = None

    def __post_init__(self) -> None:
        if self.type not in _TYPE_LABELS:
            raise ValueError(f"Unsupported parameter type: {self.type}")

    def to_json_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"type": self.type}
        if self.description:
            schema["description"] = self.description
        if self.pattern:
            schema["pattern"] = self.pattern
        return schema


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    field: Optional[str]
    message: str


@dataclass(slots=True)
class ValidationResult:
    values: Dict[str, Any] = field(default_factory=dict)
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues

    def describe(self) -> str:
        return "; ".join(issue.message for issue in self.issues)


def build_input_schema(params: Mapping[str, ParamSpec]) -> Dict[str, Any]:
    """Render a parameter mapping as a JSON Schema object for tool listings."""
    return {
        "type": "object",
        "properties": {name: spec.to_json_schema() for name, spec in params.items()},
        "required": [name for name, spec in params.items() if not spec.optional],
        "additionalProperties": False,
    }


def _matches_type(value: Any, expected: str) -> bool:
    if expected == "string":
        return isinstance(value, str)
    if expected == "boolean":
        return isinstance(value, bool)
    if isinstance(value, bool):
        return False
    if expected == "integer":
        return isinstance(value, int) or (isinstance(value, float) and value.is_integer())
    return isinstance(value, (int, float))


def _coerce(value: Any, expected: str) -> Any:
    if expected == "integer" and isinstance(value, float):
        return int(value)
    return value


def validate(params: Mapping[str, ParamSpec], arguments: Any) -> ValidationResult:
    """
    Check raw arguments against a parameter mapping.

    Every violation is reported, in parameter order. Keys not declared in
    ``params`` are dropped; optional parameters passed as ``None`` are treated
    as absent.
    """
    result = ValidationResult()
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        result.issues.append(ValidationIssue(None, "arguments must be an object"))
        return result

    for name, spec in params.items():
        value = arguments.get(name)
        if value is None:
            if not spec.optional:
                result.issues.append(ValidationIssue(name, f"'{name}' is required"))
            continue

        if not _matches_type(value, spec.type):
            result.issues.append(
                ValidationIssue(name, f"'{name}' must be {_TYPE_LABELS[spec.type]}")
            )
            continue

        if spec.pattern and not re.fullmatch(spec.pattern, value):
            label = spec.pattern_label or f"match {spec.pattern}"
            if spec.secret:
                message = f"'{name}' must be {label}"
            else:
                message = f"'{name}' must be {label}, got {value!r}"
            result.issues.append(ValidationIssue(name, message))
            continue

        result.values[name] = _coerce(value, spec.type)

    return result
