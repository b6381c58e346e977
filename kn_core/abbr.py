"""Abbreviation fragments and the component matcher."""

import re
from dataclasses import dataclass
from typing import Optional

from thefuzz import fuzz

from kn_common.constants import WILDCARD_SYMBOL
from kn_core.congruence import Congruence
from kn_core.errors import InvalidAbbreviationError, NonUnicodeInputError

# Path separators (both flavours) and any whitespace.
INVALID_CHARS_RE = re.compile(r"[/\\\s]")
ONLY_DOTS_RE = re.compile(r"^\.+$")

MAX_SIMILARITY = 100


def ensure_text(component: str) -> str:
    """Reject strings carrying undecodable bytes (surrogate-escaped argv)."""
    try:
        component.encode("utf-8")
    except UnicodeEncodeError:
        raise NonUnicodeInputError(component.encode("utf-8", "backslashreplace").decode("utf-8"))
    return component


def string_distance(fragment: str, component: str) -> int:
    """0 for identical strings, up to 100 for strings with nothing in common."""
    return MAX_SIMILARITY - fuzz.ratio(fragment, component)


def is_subsequence(needle: str, haystack: str) -> bool:
    chars = iter(haystack)
    return all(c in chars for c in needle)


@dataclass(frozen=True)
class Abbr:
    """A literal fragment (stored lower-cased) or the wildcard `-`."""
    text: str
    is_wildcard: bool = False

    @classmethod
    def wildcard(cls) -> "Abbr":
        return cls(WILDCARD_SYMBOL, is_wildcard=True)

    @classmethod
    def literal(cls, text: str) -> "Abbr":
        """Literal without the dots check. Used for incremental input like `.` of `.config`."""
        if not text or INVALID_CHARS_RE.search(text):
            raise InvalidAbbreviationError(text)
        return cls(ensure_text(text).lower())

    @classmethod
    def from_string(cls, pattern: str) -> "Abbr":
        if pattern == WILDCARD_SYMBOL:
            return cls.wildcard()
        if not pattern or INVALID_CHARS_RE.search(pattern) or ONLY_DOTS_RE.match(pattern):
            raise InvalidAbbreviationError(pattern)
        return cls(ensure_text(pattern).lower())

    def compare(self, component: str) -> Optional[Congruence]:
        """Match strength against one path component, or None when it doesn't match."""
        if self.is_wildcard:
            return Congruence.wildcard()

        component = component.lower()
        if not component:
            return None
        if self.text == component:
            return Congruence.complete()
        if component.startswith(self.text):
            return Congruence.prefix(string_distance(self.text, component))
        if is_subsequence(self.text, component):
            return Congruence.subsequence(string_distance(self.text, component))
        return None

    def __str__(self) -> str:
        return self.text
