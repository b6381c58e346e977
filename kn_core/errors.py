"""Errors raised by the matching engine.

Everything a user can cause derives from KnError and carries a one-line
message. InternalError marks a broken invariant: it records where it was
raised and the state involved so the CLI can render a bug report.
"""

import os
import traceback
from typing import Any, Optional


class KnError(Exception):
    """Base for all kn errors."""


class EmptyAbbreviationError(KnError):
    def __init__(self):
        super().__init__("Empty abbreviation.")


class InvalidAbbreviationError(KnError):
    def __init__(self, fragment: str):
        self.fragment = fragment
        super().__init__(f"Invalid abbreviation `{fragment}`.")


class NonUnicodeInputError(KnError):
    def __init__(self, component: str):
        self.component = component
        super().__init__(f"Non-Unicode input received: {component!r}.")


class WildcardAtLastPlaceError(KnError):
    def __init__(self):
        super().__init__("Wildcard `-` cannot be the last abbreviation.")


class InvalidArgValueError(KnError):
    def __init__(self, arg: str, value: Any = None):
        self.arg = arg
        self.value = value
        suffix = f": {value!r}" if value is not None else ""
        super().__init__(f"Value of arg `{arg}` is invalid{suffix}.")


class NoPathFoundError(KnError):
    def __init__(self):
        super().__init__("Path not found.")


class CancelledError(KnError):
    def __init__(self):
        super().__init__("Cancelled.")


class InternalError(KnError):
    """An invariant was violated. This is a bug, not a user mistake."""

    def __init__(self, message: str, location: str = "", state: Optional[Any] = None):
        self.message = message
        self.location = location
        self.state = state
        super().__init__(f"Internal error: {message}.")


def dev_err(message: str, state: Optional[Any] = None) -> InternalError:
    """Build an InternalError that remembers the caller's file, line and function."""
    caller = traceback.extract_stack(limit=2)[0]
    location = f"{os.path.basename(caller.filename)}:{caller.lineno} in {caller.name}()"
    return InternalError(message, location=location, state=state)
