"""Message and label rendering shared by scopes, logging and assertions."""

from __future__ import annotations

from typing import Any


def render(template: object, args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    """Format ``template`` with ``str.format`` semantics.

    Without arguments the template is used verbatim, so a literal message may
    contain braces. Formatting errors propagate to the caller.
    """
    if args or kwargs:
        return str(template).format(*args, **kwargs)
    return template if isinstance(template, str) else str(template)


__all__ = ["render"]
