"""Breadth-first traversal of the directory tree driven by the sequence matcher."""

from collections import deque
from typing import Callable, Deque, List, Optional

from kn_core.entry import Entry, Expand, FullMatch, Prune
from kn_core.errors import NoPathFoundError, dev_err
from kn_core.fs import FileSystem
from kn_core.ranking import Finding, sort_findings
from kn_core.sequence import SearchOpts, Sequence

LogSink = Callable[[str], None]


class SearchEngine:
    """Collects every path that satisfies all sequences within the depth bounds.

    The queue is FIFO so shallower matches are always found before deeper
    ones. All full matches are kept and ranked together.
    """

    def __init__(self, file_system: FileSystem, opts: SearchOpts, log_sink: Optional[LogSink] = None):
        self.file_system = file_system
        self.opts = opts
        self._log_sink = log_sink

    def _log(self, message: str) -> None:
        if self._log_sink is not None:
            self._log_sink(message)

    def seed(self, sequences: List[Sequence]) -> Deque[Entry]:
        if not sequences:
            raise dev_err("search started without sequences", sequences)
        children = self.file_system.read_dir(self.opts.start_dir)
        self._log(f"Searching `{' '.join(str(s) for s in sequences)}` from {self.opts.start_dir} ({len(children)} children)")
        return deque(Entry(child, tuple(sequences)) for child in children)

    def search(self, sequences: List[Sequence]) -> List[Finding]:
        """Ranked full matches, best first. Raises NoPathFoundError when there is none."""
        queue = self.seed(sequences)
        findings: List[Finding] = []

        while queue:
            entry = queue.popleft()
            flow = entry.advance(self.opts, self.file_system)

            if isinstance(flow, Prune):
                self._log(f"Dead end at {entry.path}: {flow.reason}")
            elif isinstance(flow, Expand):
                if flow.rewound:
                    self._log(f"Premature match below {entry.path.parent}, retrying `{entry.sequences[0]}` from its first fragment")
                queue.extend(flow.children)
            elif isinstance(flow, FullMatch):
                self._log(f"Full match {flow.finding.path} [{', '.join(str(c) for c in flow.finding.congruence)}]")
                findings.append(flow.finding)
            else:
                raise dev_err("unknown entry flow", flow)

        self._log(f"Found {len(findings)} path(s)")
        if not findings:
            raise NoPathFoundError()
        return sort_findings(findings)
