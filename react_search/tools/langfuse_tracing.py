"""Langfuse tracing helpers.

Goal
- Make agent calls, prompt pulls and search tool calls observable in Langfuse.
- Keep instrumentation optional (no-op unless LANGFUSE_* env vars are set).

We instrument at three levels:
1) A per-request top-level trace (created from `react_search.main`)
2) The prompt pull and executor run inside `ReActAgent`
3) Tool calls via a tiny decorator usable by any tool callable

The current trace/span live in context variables so nested calls (request ->
agent -> tool) attach to the active trace.  Each thread and each asyncio task
gets its own copy, so concurrent agent calls never share a span.
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Callable, Iterator, Optional, TypeVar, cast

from langfuse import Langfuse

_T = TypeVar("_T")

_langfuse_client: Optional[Any] = None

logger = logging.getLogger("react_search.langfuse")

_current_trace: ContextVar[Optional[Any]] = ContextVar("langfuse_current_trace", default=None)
_current_span: ContextVar[Optional[Any]] = ContextVar("langfuse_current_span", default=None)


def _enabled() -> bool:
    return bool(os.getenv("LANGFUSE_PUBLIC_KEY") and os.getenv("LANGFUSE_SECRET_KEY") and os.getenv("LANGFUSE_HOST"))


def get_langfuse() -> Optional[Any]:
    """Return a singleton Langfuse client if configured, else None."""
    global _langfuse_client
    if _langfuse_client is not None:
        return _langfuse_client

    if not _enabled():
        return None

    _langfuse_client = Langfuse(
        public_key=os.getenv("LANGFUSE_PUBLIC_KEY"),
        secret_key=os.getenv("LANGFUSE_SECRET_KEY"),
        host=os.getenv("LANGFUSE_HOST"),
    )
    return _langfuse_client


def start_trace(
    *,
    name: str,
    user_id: Optional[str] = None,
    session_id: Optional[str] = None,
    input: Optional[Any] = None,
    metadata: Optional[dict[str, Any]] = None,
) -> Optional[Any]:
    """Start a Langfuse trace (as its root span) and set it as current."""
    client = get_langfuse()
    if client is None:
        return None

    root = client.start_span(name=name, input=input, metadata=metadata)
    root.update_trace(name=name, user_id=user_id, session_id=session_id, input=input)
    _current_trace.set(root)
    _current_span.set(None)
    return root


def get_current_trace() -> Optional[Any]:
    return _current_trace.get()


def end_trace(trace: Optional[Any], *, output: Optional[Any] = None, error: Optional[str] = None) -> None:
    if trace is None:
        return
    if error:
        trace.update(level="ERROR", status_message=error)
    if output is not None:
        trace.update(output=output)
        trace.update_trace(output=output)
    trace.end()

    # Flush so traces appear quickly in the UI; a failed flush must not fail the request.
    try:
        client = get_langfuse()
        if client is not None:
            client.flush()
    except Exception:
        logger.exception("Failed to flush Langfuse client")
    _current_trace.set(None)
    _current_span.set(None)


@contextmanager
def traced_span(
    name: str,
    *,
    input: Optional[Any] = None,
    metadata: Optional[dict[str, Any]] = None,
) -> Iterator[Optional[Any]]:
    """Record the enclosed block as a span under the current trace/span.

    Yields the span (``None`` when tracing is off) so callers can attach
    output with ``span.update(output=...)``.  Exceptions are recorded on the
    span and re-raised.
    """
    parent = _current_span.get() or get_current_trace()
    if parent is None:
        yield None
        return

    span = parent.start_span(name=name, input=input, metadata=metadata)
    token = _current_span.set(span)
    try:
        yield span
    except BaseException as e:
        span.update(level="ERROR", status_message=str(e))
        raise
    finally:
        span.end()
        _current_span.reset(token)


def traced_tool(
    name: Optional[str] = None,
    *,
    capture_input: bool = True,
    capture_output: bool = True,
) -> Callable[[Callable[..., _T]], Callable[..., _T]]:
    """Decorator to record tool calls as spans.

    Usage:
        @traced_tool("google.search")
        def run_search(...):
            ...
    """

    def deco(fn: Callable[..., _T]) -> Callable[..., _T]:
        tool_name = name or fn.__name__

        def wrapped(*args: Any, **kwargs: Any) -> _T:
            with traced_span(
                f"tool:{tool_name}",
                input={"args": args, "kwargs": kwargs} if capture_input else None,
                metadata={"kind": "tool", "tool_name": tool_name},
            ) as span:
                out = fn(*args, **kwargs)
                if span is not None and capture_output:
                    span.update(output=out)
                return out

        wrapped.__name__ = fn.__name__
        wrapped.__doc__ = fn.__doc__
        return cast(Callable[..., _T], wrapped)

    return deco
