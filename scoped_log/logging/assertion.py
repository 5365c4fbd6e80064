"""Context-aware assertions.

``scoped_assert(cond)`` behaves like ``assert cond`` but the failure message
carries the active scope label::

    with log_scope("outer-scope"):
        scoped_assert(len(rows) > 0)
    # ScopedAssertionError: outer-scope: len(rows) > 0

A passing assertion returns before touching the scope stack. On failure the
detail is the rendered custom message, or else the source text of the
condition recovered from the caller's frame.
"""

from __future__ import annotations

import ast
import sys
import inspect
import linecache
from types import FrameType
from typing import Any

from .render import render
from .stack import current_stack
from ..errors import ScopedAssertionError
from ..config.logging import SCOPE_SEPARATOR
from ..telemetry.sentry import capture_error

UNKNOWN_CONDITION = "assertion failed"


def _call_source(frame: FrameType) -> str | None:
    positions = getattr(inspect.getframeinfo(frame, context=0), "positions", None)
    if positions is None or positions.lineno is None or positions.end_lineno is None:
        return None
    lines = linecache.getlines(frame.f_code.co_filename, frame.f_globals)
    if not lines or positions.end_lineno > len(lines):
        return None
    # Column offsets are UTF-8 byte offsets
    chunk = [line.encode("utf-8") for line in lines[positions.lineno - 1 : positions.end_lineno]]
    if positions.end_col_offset is not None:
        chunk[-1] = chunk[-1][: positions.end_col_offset]
    if positions.col_offset is not None:
        chunk[0] = chunk[0][positions.col_offset :]
    return b"".join(chunk).decode("utf-8", errors="replace")


def condition_text(frame: FrameType) -> str:
    """Source text of the first argument of the call executing in ``frame``."""
    source = _call_source(frame)
    if source is None:
        return UNKNOWN_CONDITION
    try:
        node = ast.parse(source.strip(), mode="eval").body
    except SyntaxError:
        return UNKNOWN_CONDITION
    if not isinstance(node, ast.Call):
        return UNKNOWN_CONDITION
    if node.args:
        arg = node.args[0]
    else:
        arg = next((kw.value for kw in node.keywords if kw.arg == "condition"), None)
        if arg is None:
            return UNKNOWN_CONDITION
    return ast.get_source_segment(source.strip(), arg) or ast.unparse(arg)


def _fail(template: object | None, args: tuple[Any, ...], kwargs: dict[str, Any], frame: FrameType) -> ScopedAssertionError:
    detail = render(template, args, kwargs) if template is not None else condition_text(frame)
    error = ScopedAssertionError(detail, current_stack().current(), separator=SCOPE_SEPARATOR)
    capture_error(error, scope=error.scope)
    return error


def scoped_assert(condition: object, template: object | None = None, *args: Any, **kwargs: Any) -> None:
    """Raise ``ScopedAssertionError`` if ``condition`` is false.

    Args:
        condition: Value tested for truthiness.
        template: Optional message, formatted with ``args``/``kwargs``.

    Raises:
        ScopedAssertionError: With the scope-prefixed message.
    """
    if condition:
        return
    __tracebackhide__ = True  # noqa: F841
    raise _fail(template, args, kwargs, sys._getframe(1))


def debug_assert(condition: object, template: object | None = None, *args: Any, **kwargs: Any) -> None:
    """Like ``scoped_assert`` but skipped when Python runs with ``-O``."""
    if not __debug__ or condition:
        return
    __tracebackhide__ = True  # noqa: F841
    raise _fail(template, args, kwargs, sys._getframe(1))


__all__ = ["UNKNOWN_CONDITION", "condition_text", "debug_assert", "scoped_assert"]
