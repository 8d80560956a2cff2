"""
Fault Boundary
Runs one component constructor so that its failure stays local
"""

from dataclasses import dataclass
from typing import Any, Callable

from returns.result import Result, Success, Failure

from .types import Node


@dataclass(frozen=True)
class RenderFailure:
    """Captured failure of a component constructor (for Result pattern)."""

    message: str
    exception_type: str
    exception: BaseException | None = None


def isolate(fn: Callable[[], Any]) -> Result[Node, RenderFailure]:
    """
    Call a constructor and capture any failure as data.

    Args:
        fn: Zero-argument callable expected to return a Node

    Returns:
        Success with the node, or Failure when fn raised or returned
        something that is not a Node
    """
    try:
        value = fn()
    except Exception as e:
        return Failure(RenderFailure(str(e) or type(e).__name__, type(e).__name__, e))

    if not isinstance(value, Node):
        return Failure(
            RenderFailure(
                f"Component returned {type(value).__name__}, expected Node",
                "TypeError",
            )
        )
    return Success(value)
