from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

from kn_core.congruence import Congruence, CongruenceKind  # noqa: E402


def test_tiers_are_totally_ordered():
    ordered = [
        Congruence.complete(),
        Congruence.prefix(0),
        Congruence.prefix(40),
        Congruence.subsequence(10),
        Congruence.subsequence(60),
        Congruence.wildcard(),
        Congruence.naught(),
    ]
    for ix, lower in enumerate(ordered):
        for higher in ordered[ix + 1:]:
            assert lower < higher
            assert not higher < lower


def test_vectors_compare_first_fragment_first():
    better = (Congruence.complete(), Congruence.subsequence(90))
    worse = (Congruence.prefix(10), Congruence.complete())
    assert better < worse


def test_partial_covers_prefix_and_subsequence():
    assert Congruence.prefix(3).is_partial
    assert Congruence.subsequence(3).is_partial
    assert not Congruence.complete().is_partial
    assert not Congruence.wildcard().is_partial
    assert Congruence.naught().is_naught


def test_str():
    assert str(Congruence.complete()) == "complete"
    assert str(Congruence.prefix(50)) == "prefix(50)"
    assert str(Congruence.wildcard()) == "wildcard"
    assert Congruence.subsequence(1).kind == CongruenceKind.SUBSEQUENCE
