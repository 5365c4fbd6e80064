"""Entering and leaving log scopes.

``log_scope`` pushes a label on the calling thread's scope stack and returns
a ``ScopeToken``. Closing the token pops exactly that entry. Use it as a
context manager so the pop runs on every exit path::

    with log_scope("outer-scope"):
        with log_scope("{!r}-scope", item):
            info("processing")   # "outer-scope: Item(...)-scope: processing"

``run_in_scope`` and the ``scoped`` decorator wrap the same mechanism for
callers that prefer not to hold a token at all.
"""

from __future__ import annotations

import functools
import inspect
import threading
import warnings
from collections.abc import Callable
from typing import Any, TypeVar

from .render import render
from .stack import ScopeStack, current_stack, report_misuse

T = TypeVar("T")


class ScopeToken:
    """Handle for one pushed scope entry.

    Tokens are bound to the thread that created them and cannot be copied or
    pickled. A token that is garbage collected while still open emits a
    ``ResourceWarning``; the finalizer never pops because it may run on an
    unrelated thread.
    """

    __slots__ = ("label", "entry", "depth", "_stack", "_thread_id", "_closed")

    def __init__(self, stack: ScopeStack, label: str, depth: int) -> None:
        self._closed = True
        self.label = label
        self.depth = depth
        self.entry = stack.current()
        self._stack = stack
        self._thread_id = threading.get_ident()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Pop this token's entry from its thread's scope stack."""
        if self._closed:
            report_misuse("double_close", f"scope {self.label!r} closed twice")
            return
        if threading.get_ident() != self._thread_id:
            report_misuse("cross_thread", f"scope {self.label!r} closed on a thread that did not enter it")
            return
        stack = self._stack
        if stack.depth != self.depth + 1:
            report_misuse(
                "out_of_order",
                f"scope {self.label!r} at depth {self.depth} closed while stack depth is {stack.depth}",
            )
            # Inner scopes left open are dropped with this one.
            stack.truncate(self.depth)
            self._closed = True
            return
        stack.pop()
        self._closed = True

    def __enter__(self) -> ScopeToken:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __reduce_ex__(self, protocol):
        raise TypeError("ScopeToken cannot be copied or pickled")

    def __del__(self) -> None:
        if not getattr(self, "_closed", True):
            warnings.warn(f"unclosed scope token {self.label!r}", ResourceWarning, source=self)

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<ScopeToken {self.entry!r} depth={self.depth} {state}>"


def log_scope(template: object, *args: Any, **kwargs: Any) -> ScopeToken:
    """Enter a scope labelled ``template.format(*args, **kwargs)``.

    Without arguments ``template`` is used verbatim. The returned token must
    be closed on the same thread, innermost first.
    """
    label = render(template, args, kwargs)
    stack = current_stack()
    depth = stack.push(label)
    return ScopeToken(stack, label, depth)


def run_in_scope(body: Callable[[], T], template: object, *args: Any, **kwargs: Any) -> T:
    """Run ``body`` inside a scope and return its result."""
    with log_scope(template, *args, **kwargs):
        return body()


def scoped(template: str) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Decorate a function so each call runs inside a scope.

    The template may name the function's parameters, e.g.
    ``@scoped("{self!r}-scope")`` or ``@scoped("load {path}")``. Templates
    without braces are used verbatim.

    Raises:
        TypeError: If applied to a coroutine, generator or async generator
            function. Their bodies suspend and resume, which a per-thread
            stack cannot follow.
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        if (
            inspect.iscoroutinefunction(func)
            or inspect.isgeneratorfunction(func)
            or inspect.isasyncgenfunction(func)
        ):
            raise TypeError(f"scoped() cannot wrap suspendable function {func.__qualname__}")

        if "{" not in template:

            @functools.wraps(func)
            def fixed(*args: Any, **kwargs: Any) -> T:
                with log_scope(template):
                    return func(*args, **kwargs)

            return fixed

        signature = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            bound = signature.bind(*args, **kwargs)
            bound.apply_defaults()
            with log_scope(template.format(**bound.arguments)):
                return func(*args, **kwargs)

        return wrapper

    return decorator


def current_scope() -> str | None:
    """Cumulative label of the innermost active scope on this thread."""
    return current_stack().current()


def scope_depth() -> int:
    """Number of active scopes on this thread."""
    return current_stack().depth


__all__ = [
    "ScopeToken",
    "current_scope",
    "log_scope",
    "run_in_scope",
    "scope_depth",
    "scoped",
]
