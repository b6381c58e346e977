"""Match strength between an abbreviation fragment and a path component.

Paths are ordered by comparing their congruence vectors left to right
(parent first). For a single component the order is:

    COMPLETE < PREFIX(d) < SUBSEQUENCE(d) < WILDCARD < NAUGHT

Within PREFIX and SUBSEQUENCE a smaller distance ranks better. NAUGHT is
only reported by the sequence matcher for a component that matched nothing;
it never ends up in a Finding.
"""

from dataclasses import dataclass
from enum import IntEnum, auto


class CongruenceKind(IntEnum):
    COMPLETE = 0
    PREFIX = auto()
    SUBSEQUENCE = auto()
    WILDCARD = auto()
    NAUGHT = auto()


@dataclass(frozen=True, order=True)
class Congruence:
    kind: CongruenceKind
    distance: int = 0

    @classmethod
    def complete(cls) -> "Congruence":
        return cls(CongruenceKind.COMPLETE)

    @classmethod
    def prefix(cls, distance: int) -> "Congruence":
        return cls(CongruenceKind.PREFIX, distance)

    @classmethod
    def subsequence(cls, distance: int) -> "Congruence":
        return cls(CongruenceKind.SUBSEQUENCE, distance)

    @classmethod
    def wildcard(cls) -> "Congruence":
        return cls(CongruenceKind.WILDCARD)

    @classmethod
    def naught(cls) -> "Congruence":
        return cls(CongruenceKind.NAUGHT)

    @property
    def is_complete(self) -> bool:
        return self.kind == CongruenceKind.COMPLETE

    @property
    def is_partial(self) -> bool:
        """True for a non-exact literal match (prefix or subsequence)."""
        return self.kind in (CongruenceKind.PREFIX, CongruenceKind.SUBSEQUENCE)

    @property
    def is_wildcard(self) -> bool:
        return self.kind == CongruenceKind.WILDCARD

    @property
    def is_naught(self) -> bool:
        return self.kind == CongruenceKind.NAUGHT

    def __str__(self) -> str:
        name = self.kind.name.lower()
        if self.is_partial:
            return f"{name}({self.distance})"
        return name
