"""Filesystem capability used by the search.

The engine only ever asks two questions: which child directories does P
have, and is P a directory. Both swallow OS errors, an unreadable subtree
simply has no children.
"""

import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol, Union, runtime_checkable

from kn_common.constants import CURRENT_DIR, PATH_SEPARATOR

PathLike = Union[str, Path]


@runtime_checkable
class FileSystem(Protocol):
    def read_dir(self, path: PathLike) -> List[Path]:
        ...

    def is_dir(self, path: PathLike) -> bool:
        ...


class DefaultFileSystem:
    def __init__(self, follow_symlinks: bool = True):
        self.follow_symlinks = follow_symlinks

    def read_dir(self, path: PathLike) -> List[Path]:
        try:
            with os.scandir(path) as it:
                entries = list(it)
        except OSError:
            return []

        children: List[Path] = []
        for entry in entries:
            try:
                if entry.is_dir(follow_symlinks=self.follow_symlinks):
                    children.append(Path(path) / entry.name)
            except OSError:
                continue
        # scandir order is arbitrary
        children.sort()
        return children

    def is_dir(self, path: PathLike) -> bool:
        try:
            return Path(path).is_dir()
        except OSError:
            return False


class MockFileSystem:
    """In-memory directory tree: {dir: [child dir, ...]}."""

    def __init__(self, tree: Optional[Dict[PathLike, Iterable[PathLike]]] = None):
        self.tree: Dict[Path, List[Path]] = {}
        for parent, children in (tree or {}).items():
            self.tree[Path(parent)] = [Path(child) for child in children]

    @classmethod
    def from_paths(cls, *paths: str, root: PathLike = CURRENT_DIR) -> "MockFileSystem":
        """Build a tree from slash separated paths relative to `root`, e.g. `a/boo`."""
        file_system = cls({root: []})
        for path in paths:
            parent = Path(root)
            for component in path.split(PATH_SEPARATOR):
                if not component:
                    continue
                child = parent / component
                siblings = file_system.tree.setdefault(parent, [])
                if child not in siblings:
                    siblings.append(child)
                file_system.tree.setdefault(child, [])
                parent = child
        return file_system

    def read_dir(self, path: PathLike) -> List[Path]:
        return list(self.tree.get(Path(path), []))

    def is_dir(self, path: PathLike) -> bool:
        return Path(path) in self.tree
