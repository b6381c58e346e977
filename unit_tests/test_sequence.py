from pathlib import Path
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from kn_core.abbr import Abbr  # noqa: E402
from kn_core.congruence import Congruence  # noqa: E402
from kn_core.errors import EmptyAbbreviationError, InternalError, InvalidAbbreviationError  # noqa: E402
from kn_core.sequence import Continue, DeadEnd, Next, SearchOpts, Sequence  # noqa: E402

UNBOUNDED = SearchOpts()


def test_from_str():
    sequence = Sequence.from_str("Pro/-/kn")
    assert [str(s) for s in sequence.slices] == ["pro", "-", "kn"]
    assert sequence.slices[1].is_wildcard
    assert str(sequence) == "pro/-/kn"
    assert sequence.slice_to_match == 0


def test_from_fragments_rejects_empty():
    with pytest.raises(EmptyAbbreviationError):
        Sequence.from_fragments([])
    with pytest.raises(InvalidAbbreviationError):
        Sequence.from_str("a//b")


def test_cursor_out_of_range_is_internal_error():
    sequence = Sequence((Abbr("a"),), slice_to_match=3)
    with pytest.raises(InternalError) as exc_info:
        sequence.current
    assert "sequence.py" in exc_info.value.location
    assert exc_info.value.state == sequence


def test_backtracking_recovery_step_by_step():
    sequence = Sequence.from_str("x/y")

    flow = sequence.match_component("x", attempt=1, last_match=None, opts=UNBOUNDED)
    assert isinstance(flow, Continue) and flow.advanced
    assert flow.strength == Congruence.complete()
    assert flow.sequence.slice_to_match == 1

    flow = flow.sequence.match_component("o", attempt=2, last_match=1, opts=UNBOUNDED)
    assert isinstance(flow, Continue) and not flow.advanced
    assert flow.sequence.slice_to_match == 0

    flow = flow.sequence.match_component("ox", attempt=3, last_match=1, opts=UNBOUNDED)
    assert isinstance(flow, Continue) and flow.advanced
    assert flow.strength.is_partial
    assert flow.sequence.slice_to_match == 1

    flow = flow.sequence.match_component("ymoron", attempt=4, last_match=3, opts=UNBOUNDED)
    assert isinstance(flow, Next)
    assert flow.strength.is_partial


def test_transitions_leave_the_sequence_untouched():
    sequence = Sequence.from_str("a/b")
    flow = sequence.match_component("a", 1, None, UNBOUNDED)
    assert flow.sequence.slice_to_match == 1
    assert sequence.slice_to_match == 0


@pytest.mark.parametrize("attempt, expect_dead", [(1, False), (2, False), (3, True), (7, True)])
def test_first_depth_bound(attempt, expect_dead):
    opts = SearchOpts(first_depth=2, next_depth=None)
    flow = Sequence.from_str("src").match_component("nope", attempt, None, opts)
    assert isinstance(flow, DeadEnd) == expect_dead


@pytest.mark.parametrize("attempt, expect_dead", [(3, False), (4, True)])
def test_next_depth_bound(attempt, expect_dead):
    opts = SearchOpts(first_depth=0, next_depth=1)
    sequence = Sequence.from_str("a/b").match_component("a", 2, None, UNBOUNDED).sequence
    flow = sequence.match_component("nope", attempt, last_match=2, opts=opts)
    assert isinstance(flow, DeadEnd) == expect_dead
    if expect_dead:
        assert "next_depth" in flow.reason


def test_zero_depths_glue_fragments():
    opts = SearchOpts(first_depth=0, next_depth=0)
    assert isinstance(Sequence.from_str("a").match_component("b", 1, None, opts), DeadEnd)
    second = Sequence.from_str("a/b").match_component("a", 1, None, opts).sequence
    assert isinstance(second.match_component("o", 2, 1, opts), DeadEnd)


def test_a_match_ignores_depth_bounds():
    opts = SearchOpts(first_depth=0, next_depth=0)
    flow = Sequence.from_str("a").match_component("a", 9, None, opts)
    assert isinstance(flow, Next)


def test_wildcard_matches_any_component():
    sequence = Sequence.from_str("a/-/b").match_component("a", 1, None, UNBOUNDED).sequence
    flow = sequence.match_component("whatever", 2, 1, UNBOUNDED)
    assert isinstance(flow, Continue)
    assert flow.strength == Congruence.wildcard()
