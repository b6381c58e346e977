"""State of the interactive navigator, independent of any terminal.

The user walks down the tree one component at a time. Typed characters
filter the children of the current location, `/` confirms the selected (or
best) child and descends into it, backspace undoes one step.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from kn_common.constants import PATH_SEPARATOR, WILDCARD_SYMBOL
from kn_core.abbr import INVALID_CHARS_RE, Abbr
from kn_core.congruence import Congruence
from kn_core.errors import NoPathFoundError, dev_err
from kn_core.fs import FileSystem
from kn_core.ranking import alphanumeric_key


@dataclass
class Location:
    root: Path
    suffix: List[str] = field(default_factory=list)
    children: List[Path] = field(default_factory=list)

    @classmethod
    def new(cls, root: Path, file_system: FileSystem) -> "Location":
        return cls(root, [], file_system.read_dir(root))

    def get_path(self) -> Path:
        return self.root.joinpath(*self.suffix)

    def push(self, component: str, file_system: FileSystem) -> None:
        if not component:
            raise dev_err("attempt to push empty component")
        if PATH_SEPARATOR in component:
            raise dev_err("attempt to push multiple components at once", component)
        self.suffix.append(component)
        self.children = file_system.read_dir(self.get_path())

    def pop(self, file_system: FileSystem) -> bool:
        did_pop = bool(self.suffix)
        if did_pop:
            self.suffix.pop()
        self.children = file_system.read_dir(self.get_path())
        return did_pop


@dataclass
class Filter:
    """User's input and the matching children indices, best first."""
    input: str
    ordering: List[int]

    @classmethod
    def new(cls, input: str, children: List[Path]) -> "Filter":
        abbr = Abbr.wildcard() if input == WILDCARD_SYMBOL else Abbr.literal(input)
        results = []
        for ix, child in enumerate(children):
            congruence: Optional[Congruence] = abbr.compare(child.name)
            if congruence is not None:
                results.append((congruence, alphanumeric_key(child.name), ix))
        results.sort()
        return cls(input, [ix for _, _, ix in results])

    def order_children(self, children: List[Path]) -> List[Path]:
        return [children[ix] for ix in self.ordering if ix < len(children)]

    def translate_index(self, suggestion_ix: int) -> int:
        if not 0 <= suggestion_ix < len(self.ordering):
            raise dev_err("suggestion out of bounds", (self, suggestion_ix))
        return self.ordering[suggestion_ix]


@dataclass
class UIState:
    input: Optional[str]
    location: List[str]
    suggestions: List[str]


class InteractiveSearch:
    def __init__(self, root: Path, file_system: FileSystem):
        self.file_system = file_system
        self.location = Location.new(root, file_system)
        self.filter: Optional[Filter] = None
        self.selection: Optional[int] = None

    def handle_input(self, c: str) -> UIState:
        if c == PATH_SEPARATOR:
            self.confirm_selection()
        elif not INVALID_CHARS_RE.match(c):
            self.consume_char(c)
        return self.get_ui_state()

    def handle_backspace(self) -> UIState:
        if self.filter is not None:
            remaining = self.filter.input[:-1]
            self.filter = Filter.new(remaining, self.location.children) if remaining else None
        else:
            self.location.pop(self.file_system)
        # the selection indexed the children before this step
        self.selection = None
        return self.get_ui_state()

    def consume_char(self, c: str) -> None:
        new_input = self.filter.input + c if self.filter is not None else c
        self.filter = Filter.new(new_input, self.location.children)
        self.selection = None

    def select_suggestion(self, suggestion_ix: int) -> None:
        if self.filter is not None:
            self.selection = self.filter.translate_index(suggestion_ix)
        elif 0 <= suggestion_ix < len(self.location.children):
            self.selection = suggestion_ix
        else:
            raise dev_err("suggestion out of bounds", suggestion_ix)

    def _chosen_child(self) -> Optional[Path]:
        if self.selection is not None:
            if not 0 <= self.selection < len(self.location.children):
                raise dev_err("child out of bounds", self.selection)
            return self.location.children[self.selection]
        if self.filter is not None and self.filter.ordering:
            return self.location.children[self.filter.ordering[0]]
        return None

    def confirm_selection(self) -> None:
        child = self._chosen_child()
        if child is not None:
            self.location.push(child.name, self.file_system)
        self.selection = None
        self.filter = None

    def get_path(self) -> Path:
        child = self._chosen_child()
        if child is not None:
            return child
        if self.filter is not None:
            raise NoPathFoundError()
        return self.location.get_path()

    def get_ui_state(self) -> UIState:
        children = self.location.children
        if self.filter is not None:
            children = self.filter.order_children(children)
        return UIState(
            input=self.filter.input if self.filter is not None else None,
            location=list(self.location.suffix),
            suggestions=[child.name for child in children],
        )
