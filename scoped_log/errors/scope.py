"""Scope token misuse exceptions.

Misuse covers popping an empty scope stack and closing a token twice, out of
order, or on a thread other than the one that entered the scope. These are
programming errors and are only raised while debug checks are enabled.
"""


class ScopeMisuseError(RuntimeError):
    """Raised when the scope stack is driven outside its LIFO contract.

    Attributes:
        kind: Short identifier of the misuse (``empty_pop``, ``double_close``,
            ``cross_thread``, ``out_of_order``).
    """

    def __init__(self, kind: str, message: str) -> None:
        super().__init__(message)
        self.kind = kind


__all__ = ["ScopeMisuseError"]
