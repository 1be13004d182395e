"""
Engine failure types.

The engine has exactly one fault: reading or writing criteria for a filter
kind that is not registered. Every other malformed-data situation degrades to
"no match" inside the predicates and never raises.
"""

from typing import Any


class UnknownFilterKindError(KeyError):
    """
    Raised when criteria are read or written for an unregistered filter kind.

    This is a programmer error and is not meant to be recovered from.
    """

    def __init__(self, kind: Any, registered: tuple[str, ...] = ()):
        self.kind = kind
        self.registered = registered
        message = f"Unknown filter kind {kind!r}"
        if registered:
            message += f". Registered kinds: {', '.join(registered)}"
        super().__init__(message)
