from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

from kn_common.input_utils import NavigatorSession, SuggestionPager, build_navigator_bindings  # noqa: E402
from kn_core.fs import MockFileSystem  # noqa: E402


def test_pager_selection_wraps():
    pager = SuggestionPager(page_size=2)
    pager.reset(["a", "b", "c"])
    assert pager.selected is None
    assert pager.select_next() == 0
    assert pager.select_next() == 1
    assert pager.select_next() == 2
    assert pager.select_next() == 0
    assert pager.select_prev() == 2


def test_pager_pages():
    pager = SuggestionPager(page_size=2)
    pager.reset(["a", "b", "c", "d", "e"])
    assert pager.n_pages == 3
    assert pager.current_page() == [(0, "a"), (1, "b")]
    assert pager.next_page() == 2
    assert pager.page_ix == 1
    assert pager.current_page() == [(2, "c"), (3, "d")]
    assert pager.next_page() == 4
    assert pager.next_page() == 0
    assert pager.prev_page() == 4


def test_empty_pager():
    pager = SuggestionPager(page_size=3)
    assert pager.n_pages == 1
    assert pager.select_next() is None
    assert pager.next_page() is None
    assert pager.current_page() == []


def make_session(**kwargs) -> NavigatorSession:
    file_system = MockFileSystem.from_paths("alpha/one", "beta", "alpine")
    return NavigatorSession(Path("."), file_system, page_size=2, **kwargs)


def test_session_typing_and_selection():
    session = make_session()
    session.type_char("a")
    session.type_char("l")
    assert session.pager.suggestions == ["alpha", "alpine"]

    session.move_selection(session.pager.select_next())
    session.move_selection(session.pager.select_next())
    assert session.search.get_path() == Path("alpine")

    session.type_char("/")
    assert session.ui_state.location == ["alpine"]
    assert session.pager.selected is None


def test_session_fragments():
    session = make_session()
    session.type_char("b")
    assert session.get_prompt_fragments() == [("class:location", ""), ("class:query", "b")]

    session.move_selection(session.pager.select_next())
    fragments = session.get_suggestion_fragments()
    assert fragments[0] == ("class:page", "(1/1)")
    assert ("class:selected", "beta") in fragments


def test_session_shows_empty_page():
    session = make_session()
    session.type_char("z")
    assert session.get_suggestion_fragments()[-1][0] == "class:empty"


def test_session_truncates_suggestions():
    session = make_session(max_suggestions=2)
    assert session.pager.suggestions == ["alpha", "beta"]


def test_bindings_are_built():
    bindings = build_navigator_bindings(make_session())
    assert len(bindings.bindings) >= 8
