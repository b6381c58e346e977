from pathlib import Path
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from kn_core.errors import InternalError, NoPathFoundError  # noqa: E402
from kn_core.fs import MockFileSystem  # noqa: E402
from kn_core.interactive import Filter, InteractiveSearch, Location  # noqa: E402


def make_search() -> InteractiveSearch:
    file_system = MockFileSystem.from_paths("alpha/one", "alpha/two", "beta", "alpine")
    return InteractiveSearch(Path("."), file_system)


def test_initial_state_lists_children():
    state = make_search().get_ui_state()
    assert state.input is None
    assert state.location == []
    assert state.suggestions == ["alpha", "beta", "alpine"]


def test_typing_filters_and_orders_suggestions():
    search = make_search()
    state = search.handle_input("a")
    assert state.input == "a"
    # prefixes first, then the subsequence match in `beta`
    assert state.suggestions == ["alpha", "alpine", "beta"]

    state = search.handle_input("l")
    assert state.input == "al"
    assert state.suggestions == ["alpha", "alpine"]


def test_slash_confirms_best_suggestion():
    search = make_search()
    search.handle_input("a")
    state = search.handle_input("/")
    assert state.input is None
    assert state.location == ["alpha"]
    assert state.suggestions == ["one", "two"]


def test_slash_confirms_selected_suggestion():
    search = make_search()
    search.handle_input("a")
    search.select_suggestion(1)
    assert search.handle_input("/").location == ["alpine"]


def test_backspace_removes_last_char_then_pops_location():
    search = make_search()
    search.handle_input("a")
    search.handle_input("l")
    assert search.handle_backspace().input == "a"
    assert search.handle_backspace().input is None

    search.handle_input("a")
    search.handle_input("/")
    state = search.handle_backspace()
    assert state.location == []
    assert state.suggestions == ["alpha", "beta", "alpine"]
    # nothing left to pop
    assert search.handle_backspace().location == []


def test_invalid_chars_are_ignored():
    search = make_search()
    before = search.get_ui_state()
    assert search.handle_input(" ") == before
    assert search.handle_input("\\") == before


def test_get_path():
    search = make_search()
    assert search.get_path() == Path(".")
    search.handle_input("a")
    search.handle_input("l")
    assert search.get_path() == Path("alpha")
    search.handle_input("/")
    assert search.get_path() == Path("alpha")
    search.handle_input("t")
    assert search.get_path() == Path("alpha/two")


def test_get_path_without_match():
    search = make_search()
    search.handle_input("z")
    assert search.get_ui_state().suggestions == []
    with pytest.raises(NoPathFoundError):
        search.get_path()


def test_select_out_of_bounds_is_internal_error():
    search = make_search()
    search.handle_input("a")
    with pytest.raises(InternalError):
        search.select_suggestion(10)
    with pytest.raises(InternalError):
        make_search().select_suggestion(-1)


def test_dots_and_wildcard_are_literal_input():
    file_system = MockFileSystem.from_paths(".config", "code")
    search = InteractiveSearch(Path("."), file_system)
    assert search.handle_input(".").suggestions == [".config"]
    search.handle_backspace()
    assert search.handle_input("-").suggestions == [".config", "code"]


def test_filter_translates_indices():
    children = [Path("beta"), Path("alpha")]
    filter_ = Filter.new("a", children)
    assert filter_.order_children(children) == [Path("alpha"), Path("beta")]
    assert filter_.translate_index(0) == 1
    with pytest.raises(InternalError):
        filter_.translate_index(2)


def test_location_rejects_bad_components():
    file_system = MockFileSystem.from_paths("a/b")
    location = Location.new(Path("."), file_system)
    with pytest.raises(InternalError):
        location.push("", file_system)
    with pytest.raises(InternalError):
        location.push("a/b", file_system)
    location.push("a", file_system)
    assert location.get_path() == Path("a")
    assert location.children == [Path("a/b")]


def test_backspace_pop_clears_selection():
    file_system = MockFileSystem.from_paths("alpha/one", "alpha/two", "alpha/three", "beta", "gamma")
    search = InteractiveSearch(Path("."), file_system)
    search.handle_input("a")
    search.handle_input("/")
    search.select_suggestion(2)
    assert search.get_path() == Path("alpha/three")

    state = search.handle_backspace()
    assert state.location == []
    assert state.suggestions == ["alpha", "beta", "gamma"]
    assert search.get_path() == Path(".")


def test_backspace_pop_to_shorter_listing_is_not_a_bug():
    file_system = MockFileSystem.from_paths("alpha/one", "alpha/two", "alpha/three")
    search = InteractiveSearch(Path("."), file_system)
    search.handle_input("a")
    search.handle_input("/")
    search.select_suggestion(2)
    # the root has a single child, index 2 would be out of bounds there
    search.handle_backspace()
    assert search.get_path() == Path(".")
