"""From raw CLI abbreviations to ranked directories."""

from pathlib import Path
from typing import List, Optional, Sequence as Seq, Tuple, Union

from kn_core.decompose import decompose
from kn_core.errors import EmptyAbbreviationError, InvalidAbbreviationError, NoPathFoundError, WildcardAtLastPlaceError
from kn_core.fs import DefaultFileSystem, FileSystem
from kn_core.ranking import Finding, apply_exclusion
from kn_core.search import LogSink, SearchEngine
from kn_core.sequence import SearchOpts, Sequence


def build_sequences(abbrs: Seq[str], allow_last_wildcard: bool = False) -> Tuple[Optional[Path], List[Sequence]]:
    """One Sequence per argument. Only the first argument may start with a literal path."""
    if not abbrs:
        raise EmptyAbbreviationError()

    prefix, components = decompose(abbrs[0])
    sequences: List[Sequence] = []
    if components:
        sequences.append(Sequence.from_fragments(components))

    for abbr in abbrs[1:]:
        extra_prefix, components = decompose(abbr)
        if extra_prefix is not None:
            raise InvalidAbbreviationError(abbr)
        sequences.append(Sequence.from_fragments(components))

    if sequences and sequences[-1].last.is_wildcard and not allow_last_wildcard:
        raise WildcardAtLastPlaceError()
    return prefix, sequences


def query(abbrs: Union[str, Seq[str]], opts: SearchOpts, file_system: Optional[FileSystem] = None,
          excluded: Optional[Union[str, Path]] = None, allow_last_wildcard: bool = False,
          log_sink: Optional[LogSink] = None) -> List[Finding]:
    """Ranked findings for the abbreviations, best first.

    A pure literal path (`..`, `/`, `...`) is returned as is without searching.
    """
    if isinstance(abbrs, str):
        abbrs = [abbrs]
    file_system = file_system or DefaultFileSystem()

    prefix, sequences = build_sequences(abbrs, allow_last_wildcard=allow_last_wildcard)
    start_dir = opts.start_dir / prefix if prefix is not None else opts.start_dir

    if not file_system.is_dir(start_dir):
        raise NoPathFoundError()
    if not sequences:
        return [Finding(start_dir, ())]

    engine = SearchEngine(file_system, SearchOpts(opts.first_depth, opts.next_depth, start_dir), log_sink=log_sink)
    findings = engine.search(sequences)
    return apply_exclusion(findings, excluded)
