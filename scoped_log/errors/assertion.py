"""Context-aware assertion failure."""

from __future__ import annotations


class ScopedAssertionError(AssertionError):
    """Raised when ``scoped_assert`` sees a false condition.

    The string form is the full payload: the active scope label, when there
    is one, followed by ``": "`` and the detail.

    Attributes:
        scope: Cumulative scope label at the time of failure, or None.
        detail: Rendered custom message, or the condition's source text.
    """

    def __init__(self, detail: str, scope: str | None = None, *, separator: str = ": ") -> None:
        message = f"{scope}{separator}{detail}" if scope is not None else detail
        super().__init__(message)
        self.scope = scope
        self.detail = detail
        self.message = message


__all__ = ["ScopedAssertionError"]
