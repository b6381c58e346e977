import os
from pathlib import Path
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from kn_common.core_utils import is_platform_windows  # noqa: E402
from kn_core.congruence import Congruence  # noqa: E402
from kn_core.errors import (EmptyAbbreviationError, InvalidAbbreviationError, NoPathFoundError,  # noqa: E402
                            WildcardAtLastPlaceError)
from kn_core.fs import DefaultFileSystem, MockFileSystem  # noqa: E402
from kn_core.query import build_sequences, query  # noqa: E402
from kn_core.sequence import SearchOpts  # noqa: E402

GLUED = SearchOpts(first_depth=0, next_depth=0)


def test_each_argument_is_a_sequence():
    prefix, sequences = build_sequences(["pr/kn", "src"])
    assert prefix is None
    assert [str(s) for s in sequences] == ["pr/kn", "src"]


def test_only_the_first_argument_takes_a_prefix():
    prefix, sequences = build_sequences(["../pr", "kn"])
    assert prefix == Path("..")
    assert [str(s) for s in sequences] == ["pr", "kn"]
    with pytest.raises(InvalidAbbreviationError):
        build_sequences(["pr", "../kn"])


def test_no_arguments():
    with pytest.raises(EmptyAbbreviationError):
        build_sequences([])


def test_wildcard_at_last_place():
    with pytest.raises(WildcardAtLastPlaceError):
        build_sequences(["a/-"])
    with pytest.raises(WildcardAtLastPlaceError):
        build_sequences(["a", "-"])
    _, sequences = build_sequences(["a/-"], allow_last_wildcard=True)
    assert sequences[0].last.is_wildcard


def test_pure_literal_path_is_returned_as_is():
    file_system = MockFileSystem({".": [], "..": []})
    findings = query("..", GLUED, file_system=file_system)
    assert findings[0].path == Path("..")
    assert findings[0].congruence == ()


def test_literal_prefix_moves_the_start_dir():
    file_system = MockFileSystem.from_paths("a/boo", root="..")
    findings = query(["../a/b"], GLUED, file_system=file_system)
    assert findings[0].path == Path("../a/boo")
    assert findings[0].congruence == (Congruence.complete(), Congruence.prefix(50))


def test_missing_start_dir():
    with pytest.raises(NoPathFoundError):
        query("../x", GLUED, file_system=MockFileSystem.from_paths("x"))


def test_exclusion_of_tied_candidate():
    file_system = MockFileSystem.from_paths("abc", "abd")
    assert query("ab", GLUED, file_system=file_system)[0].path == Path("abc")
    assert query("ab", GLUED, file_system=file_system, excluded="abc")[0].path == Path("abd")


def test_exclusion_keeps_unique_best():
    file_system = MockFileSystem.from_paths("abc", "xyz")
    assert query("ab", GLUED, file_system=file_system, excluded="abc")[0].path == Path("abc")


def test_log_sink_is_forwarded():
    messages = []
    query("a", GLUED, file_system=MockFileSystem.from_paths("a"), log_sink=messages.append)
    assert messages


@pytest.mark.skipif(is_platform_windows(), reason="symlinks need privileges on Windows")
def test_exclusion_through_symlinked_cwd(tmp_path, monkeypatch):
    (tmp_path / "real" / "abc").mkdir(parents=True)
    (tmp_path / "real" / "abd").mkdir()
    os.symlink(tmp_path / "real", tmp_path / "link")
    monkeypatch.chdir(tmp_path / "link")

    findings = query("ab", GLUED, file_system=DefaultFileSystem(), excluded=str(tmp_path / "link" / "abc"))
    assert [f.path for f in findings] == [Path("abd")]


def test_package_exports_only_its_own_names():
    import kn_core

    assert kn_core.NoPathFoundError is NoPathFoundError
    assert kn_core.query is query
    for helper in ("os", "traceback", "Any", "Optional"):
        assert not hasattr(kn_core, helper)
