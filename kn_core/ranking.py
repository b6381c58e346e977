"""Total order over full matches."""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from kn_core.congruence import Congruence

DIGITS_RE = re.compile(r"(\d+)")


@dataclass(frozen=True)
class Finding:
    """A fully matched path and the strength of each fragment match, first fragment first."""
    path: Path
    congruence: Tuple[Congruence, ...]

    def sort_key(self):
        return (self.congruence, alphanumeric_key(self.path.name), str(self.path))


def alphanumeric_key(name: str) -> Tuple[Union[str, int], ...]:
    """Case-insensitive natural order: `dir2` < `dir10`."""
    chunks = DIGITS_RE.split(name.casefold())
    # split() with a capture group puts the digit runs at odd indices
    return tuple(int(chunk) if ix % 2 else chunk for ix, chunk in enumerate(chunks))


def sort_findings(findings: Iterable[Finding]) -> List[Finding]:
    return sorted(findings, key=Finding.sort_key)


def _same_path(a: Union[str, Path], b: Union[str, Path]) -> bool:
    # realpath: the shell reports logical paths, os.getcwd() the physical one
    return os.path.normcase(os.path.realpath(a)) == os.path.normcase(os.path.realpath(b))


def apply_exclusion(findings: List[Finding], excluded: Optional[Union[str, Path]]) -> List[Finding]:
    """Drop `excluded` when it ties at the top rank with at least one other candidate.

    `findings` must already be sorted.
    """
    if excluded is None or len(findings) < 2:
        return findings

    top = findings[0].congruence
    tied = [finding for finding in findings if finding.congruence == top]
    if len(tied) < 2:
        return findings
    return [finding for finding in findings if not (finding.congruence == top and _same_path(finding.path, excluded))]
