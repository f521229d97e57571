"""Handler outcomes and the response envelope every dispatch produces."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Dict, List, Union


class FailureKind(str, enum.Enum):
    VALIDATION = "validation"
    UNKNOWN_TOOL = "unknown_tool"
    REMOTE = "remote"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True, slots=True)
class Success:
    text: str


@dataclass(frozen=True, slots=True)
class Failure:
    message: str
    kind: FailureKind = FailureKind.REMOTE


Outcome = Union[Success, Failure]


def error_detail(error: BaseException | Any) -> str:
    """Human-readable detail for an exception or any other raised value."""
    if isinstance(error, BaseException):
        return str(error) or error.__class__.__name__
    return str(error)


def to_envelope(outcome: Outcome) -> Dict[str, List[Dict[str, Any]]]:
    """
    Shape an outcome into the MCP content array.

    Success and failure share the same shape; callers tell them apart by text.
    """
    text = outcome.text if isinstance(outcome, Success) else outcome.message
    return {"content": [{"type": "text", "text": text}]}
