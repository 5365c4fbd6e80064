"""Exception classes for scoped logging.

Organization:
    - scope.py: Scope stack and token misuse
    - assertion.py: Context-aware assertion failures
"""

from .scope import ScopeMisuseError
from .assertion import ScopedAssertionError

__all__ = [
    "ScopeMisuseError",
    "ScopedAssertionError",
]
