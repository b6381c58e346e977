"""Sequences of abbreviation fragments and the sequence matcher.

A Sequence is immutable. Every transition hands back a new Sequence that
shares the fragment tuple and differs only in the cursor, so sibling
branches of the search never see each other's progress.
"""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

from kn_common.constants import PATH_SEPARATOR
from kn_core.abbr import Abbr
from kn_core.congruence import Congruence
from kn_core.errors import EmptyAbbreviationError, dev_err


@dataclass(frozen=True)
class SearchOpts:
    """Depth bounds of the search. None means unbounded.

    first_depth: components that may be skipped before the first fragment
        of a sequence matches.
    next_depth: components that may be skipped after the last fragment
        advance within a sequence.
    """
    first_depth: Optional[int] = None
    next_depth: Optional[int] = None
    start_dir: Path = Path(".")


@dataclass(frozen=True)
class Next:
    """The last fragment matched. Move on to the next sequence."""
    strength: Congruence


@dataclass(frozen=True)
class Continue:
    """Keep searching the children with `sequence`."""
    sequence: "Sequence"
    strength: Congruence

    @property
    def advanced(self) -> bool:
        return not self.strength.is_naught


@dataclass(frozen=True)
class DeadEnd:
    reason: str = ""


SequenceFlow = Union[Next, Continue, DeadEnd]


@dataclass(frozen=True)
class Sequence:
    slices: Tuple[Abbr, ...]
    slice_to_match: int = 0

    @classmethod
    def from_fragments(cls, fragments: Iterable[str]) -> "Sequence":
        slices = tuple(Abbr.from_string(fragment) for fragment in fragments)
        if not slices:
            raise EmptyAbbreviationError()
        return cls(slices)

    @classmethod
    def from_str(cls, text: str) -> "Sequence":
        return cls.from_fragments(text.split(PATH_SEPARATOR))

    @property
    def current(self) -> Abbr:
        if not 0 <= self.slice_to_match < len(self.slices):
            raise dev_err("sequence cursor out of range", self)
        return self.slices[self.slice_to_match]

    @property
    def is_at_last(self) -> bool:
        return self.slice_to_match == len(self.slices) - 1

    @property
    def last(self) -> Abbr:
        if not self.slices:
            raise dev_err("empty sequence constructed", self)
        return self.slices[-1]

    def rewound(self) -> "Sequence":
        if self.slice_to_match == 0:
            return self
        return replace(self, slice_to_match=0)

    def match_component(self, component: str, attempt: int, last_match: Optional[int], opts: SearchOpts) -> SequenceFlow:
        """Match `component` against the fragment under the cursor.

        `attempt` counts the components visited for this sequence, this one
        included. `last_match` is the attempt of the latest fragment advance
        within this sequence, None if there was none yet.
        """
        slice_ = self.current
        strength = slice_.compare(component)

        if strength is not None:
            # A match never violates the depth bounds.
            if self.is_at_last:
                return Next(strength)
            return Continue(replace(self, slice_to_match=self.slice_to_match + 1), strength)

        if last_match is not None:
            if opts.next_depth is not None and attempt > last_match + opts.next_depth:
                return DeadEnd(f"`{slice_}` vs `{component}`, already at allowed next_depth")
        elif opts.first_depth is not None and attempt > opts.first_depth:
            return DeadEnd(f"`{slice_}` vs `{component}`, already at allowed first_depth")

        # The previous advance may have been coincidental. Start over from the first fragment.
        return Continue(self.rewound(), Congruence.naught())

    def __str__(self) -> str:
        return PATH_SEPARATOR.join(str(slice_) for slice_ in self.slices)
