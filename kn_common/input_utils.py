from pathlib import Path
from typing import List, Optional, Tuple

from prompt_toolkit.application import Application
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.key_processor import KeyPressEvent
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout.containers import HSplit, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.layout import Layout
from prompt_toolkit.styles import Style

from kn_common.constants import DEFAULT_MAX_SUGGESTIONS, DEFAULT_PAGE_SIZE
from kn_common.format_utils import compose_location
from kn_core.errors import CancelledError, KnError
from kn_core.fs import FileSystem
from kn_core.interactive import InteractiveSearch, UIState

StyleFragments = List[Tuple[str, str]]

# Palette: https://coolors.co/9c71f3-47f0a7-cca6e8-8380b6-111d4a
NAVIGATOR_STYLE = Style.from_dict({
    "location": "#8380b6",
    "query": "#9c71f3 bold",
    "page": "#47f0a7",
    "suggestion": "",
    "selected": "bg:#9c71f3 #000000",
    "empty": "#cca6e8 italic",
})


class SuggestionPager:
    """Selection and pagination over the current suggestions. No terminal involved."""

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE):
        self.page_size = max(1, page_size)
        self.suggestions: List[str] = []
        self.selected: Optional[int] = None

    def reset(self, suggestions: List[str]) -> None:
        self.suggestions = list(suggestions)
        self.selected = None

    @property
    def n_pages(self) -> int:
        return max(1, -(-len(self.suggestions) // self.page_size))

    @property
    def page_ix(self) -> int:
        return (self.selected or 0) // self.page_size

    def current_page(self) -> List[Tuple[int, str]]:
        start = self.page_ix * self.page_size
        return list(enumerate(self.suggestions[start:start + self.page_size], start))

    def select_next(self) -> Optional[int]:
        if self.suggestions:
            self.selected = 0 if self.selected is None else (self.selected + 1) % len(self.suggestions)
        return self.selected

    def select_prev(self) -> Optional[int]:
        if self.suggestions:
            n = len(self.suggestions)
            self.selected = n - 1 if self.selected is None else (self.selected - 1) % n
        return self.selected

    def next_page(self) -> Optional[int]:
        if self.suggestions:
            page_ix = (self.page_ix + 1) % self.n_pages
            self.selected = page_ix * self.page_size
        return self.selected

    def prev_page(self) -> Optional[int]:
        if self.suggestions:
            page_ix = (self.page_ix - 1) % self.n_pages
            self.selected = page_ix * self.page_size
        return self.selected


class NavigatorSession:
    """Glue between key presses, the search state machine and the pager."""

    def __init__(self, root: Path, file_system: FileSystem, page_size: int = DEFAULT_PAGE_SIZE,
                 max_suggestions: int = DEFAULT_MAX_SUGGESTIONS):
        self.search = InteractiveSearch(root, file_system)
        self.pager = SuggestionPager(page_size)
        self.max_suggestions = max_suggestions
        self.ui_state: UIState = self.search.get_ui_state()
        self.update(self.ui_state)

    def update(self, ui_state: UIState) -> None:
        self.ui_state = ui_state
        self.pager.reset(ui_state.suggestions[:self.max_suggestions])

    def type_char(self, c: str) -> None:
        self.update(self.search.handle_input(c))

    def backspace(self) -> None:
        self.update(self.search.handle_backspace())

    def move_selection(self, selected: Optional[int]) -> None:
        if selected is not None:
            self.search.select_suggestion(selected)

    def get_prompt_fragments(self) -> StyleFragments:
        return [
            ("class:location", compose_location(self.ui_state.location)),
            ("class:query", self.ui_state.input or ""),
        ]

    def get_suggestion_fragments(self) -> StyleFragments:
        width = len(str(self.pager.n_pages))
        fragments: StyleFragments = [("class:page", f"({self.pager.page_ix + 1:{width}}/{self.pager.n_pages:{width}})")]
        page = self.pager.current_page()
        if not page:
            fragments.append(("class:empty", "  no matching directory"))
        for ix, suggestion in page:
            fragments.append(("", "  "))
            fragments.append(("class:selected" if ix == self.pager.selected else "class:suggestion", suggestion))
        return fragments


def build_navigator_bindings(session: NavigatorSession) -> KeyBindings:
    bindings = KeyBindings()

    @bindings.add(Keys.ControlC)
    def _(event: KeyPressEvent):
        event.app.exit(exception=CancelledError())

    @bindings.add(Keys.Enter)
    def _(event: KeyPressEvent):
        try:
            event.app.exit(result=session.search.get_path())
        except KnError as e:
            event.app.exit(exception=e)

    @bindings.add(Keys.Backspace)
    def _(event: KeyPressEvent):
        session.backspace()

    @bindings.add(Keys.Tab)
    @bindings.add(Keys.ControlL)
    def _(event: KeyPressEvent):
        session.move_selection(session.pager.select_next())

    @bindings.add(Keys.BackTab)
    def _(event: KeyPressEvent):
        session.move_selection(session.pager.select_prev())

    @bindings.add(Keys.ControlJ)
    @bindings.add(Keys.PageDown)
    def _(event: KeyPressEvent):
        session.move_selection(session.pager.next_page())

    @bindings.add(Keys.ControlK)
    @bindings.add(Keys.PageUp)
    def _(event: KeyPressEvent):
        session.move_selection(session.pager.prev_page())

    @bindings.add(Keys.Any)
    def _(event: KeyPressEvent):
        # Unbound special keys arrive as escape sequences
        if len(event.data) == 1 and event.data.isprintable():
            session.type_char(event.data)

    return bindings


def run_interactive_navigator(root: Path, file_system: FileSystem, page_size: int = DEFAULT_PAGE_SIZE,
                              max_suggestions: int = DEFAULT_MAX_SUGGESTIONS) -> Path:
    """Walk the tree from `root` one component at a time. Returns the chosen directory.

    Raises CancelledError on Ctrl-C and NoPathFoundError when Enter is pressed
    while the typed filter matches nothing.
    """
    session = NavigatorSession(root, file_system, page_size=page_size, max_suggestions=max_suggestions)
    layout = Layout(HSplit([
        Window(FormattedTextControl(session.get_prompt_fragments, show_cursor=True), height=1),
        Window(FormattedTextControl(session.get_suggestion_fragments), height=1),
    ]))
    app: Application = Application(
        layout=layout,
        key_bindings=build_navigator_bindings(session),
        style=NAVIGATOR_STYLE,
        full_screen=False,
        erase_when_done=True,
    )
    return app.run()
