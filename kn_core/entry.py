"""One node of the in-flight search tree."""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import List, Optional, Tuple, Union

from kn_core.congruence import Congruence
from kn_core.errors import dev_err
from kn_core.fs import FileSystem
from kn_core.ranking import Finding
from kn_core.sequence import Continue, DeadEnd, Next, SearchOpts, Sequence


@dataclass(frozen=True)
class Expand:
    children: List["Entry"]
    rewound: bool = False


@dataclass(frozen=True)
class FullMatch:
    finding: Finding


@dataclass(frozen=True)
class Prune:
    reason: str = ""


EntryFlow = Union[Expand, FullMatch, Prune]


@dataclass(frozen=True)
class Entry:
    """A candidate path plus the matching state left for it.

    `sequences` holds the sequences not yet satisfied, the first one is being
    matched. `congruence` collects the strengths of completed sequences while
    `pending` holds the tentative strengths of the current one; a
    backtracking reset throws `pending` away.
    """
    path: Path
    sequences: Tuple[Sequence, ...]
    attempt: int = 1
    last_match: Optional[int] = None
    congruence: Tuple[Congruence, ...] = ()
    pending: Tuple[Congruence, ...] = ()

    def advance(self, opts: SearchOpts, file_system: FileSystem) -> EntryFlow:
        if not self.sequences:
            return FullMatch(Finding(self.path, self.congruence + self.pending))

        component = self.path.name
        if not component:
            return Prune(f"`{self.path}` has no file name")

        current, rest = self.sequences[0], self.sequences[1:]
        flow = current.match_component(component, self.attempt, self.last_match, opts)

        if isinstance(flow, DeadEnd):
            return Prune(flow.reason)

        if isinstance(flow, Continue):
            if flow.advanced:
                template = replace(self, sequences=(flow.sequence,) + rest, last_match=self.attempt,
                                   pending=self.pending + (flow.strength,))
            else:
                template = replace(self, sequences=(flow.sequence,) + rest, pending=())
            return Expand(template.children(file_system, attempt=self.attempt + 1), rewound=bool(self.pending))

        if isinstance(flow, Next):
            congruence = self.congruence + self.pending + (flow.strength,)
            if not rest:
                return FullMatch(Finding(self.path, congruence))
            template = replace(self, sequences=rest, last_match=None, congruence=congruence, pending=())
            return Expand(template.children(file_system, attempt=1))

        raise dev_err("unknown sequence flow", flow)

    def children(self, file_system: FileSystem, attempt: int) -> List["Entry"]:
        return [replace(self, path=child, attempt=attempt) for child in file_system.read_dir(self.path)]
