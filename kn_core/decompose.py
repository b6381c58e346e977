"""Split the raw argument into a literal leading path and the abbreviation proper."""

import os
import re
from pathlib import Path
from typing import List, NamedTuple, Optional, Tuple, Union

from kn_common.constants import CURRENT_DIR, HOME_SYMBOL, PARENT_DIR
from kn_common.core_utils import is_platform_windows
from kn_core.abbr import ONLY_DOTS_RE, ensure_text
from kn_core.errors import EmptyAbbreviationError, NonUnicodeInputError

SEPARATORS_RE = re.compile(r"[\\/]+") if is_platform_windows() else re.compile(r"/+")


class Decomposition(NamedTuple):
    prefix: Optional[Path]
    components: List[str]


def split_components(raw: str) -> Tuple[str, List[str]]:
    """Return (anchor, components). The anchor is the drive plus root, e.g. `/` or `C:\\`."""
    drive, rest = os.path.splitdrive(raw)
    root = os.sep if SEPARATORS_RE.match(rest) else ""
    components = [component for component in SEPARATORS_RE.split(rest) if component]
    return drive + root, components


def decompose(raw: Union[str, bytes]) -> Decomposition:
    """Fold root, drive, `.`, `..`, `~` and dot runs (`...` = `../..`) into a literal prefix.

    Walking stops at the first ordinary component; it and everything after it
    are returned as abbreviation fragments, unvalidated.
    """
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError:
            raise NonUnicodeInputError(raw.decode("utf-8", "backslashreplace"))
    if not raw:
        raise EmptyAbbreviationError()

    anchor, components = split_components(raw)
    prefix_parts: List[str] = [anchor] if anchor else []

    rest: List[str] = []
    for ix, component in enumerate(components):
        ensure_text(component)
        if component in (CURRENT_DIR, PARENT_DIR):
            prefix_parts.append(component)
        elif component == HOME_SYMBOL and ix == 0 and not anchor:
            prefix_parts.append(os.path.expanduser(HOME_SYMBOL))
        elif ONLY_DOTS_RE.match(component):
            prefix_parts.extend([PARENT_DIR] * (len(component) - 1))
        else:
            rest = components[ix:]
            break

    for component in rest:
        ensure_text(component)

    prefix = Path(*prefix_parts) if prefix_parts else None
    return Decomposition(prefix, rest)
