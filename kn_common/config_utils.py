import os
import sys
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from kn_common.constants import (CONFIG_RELATIVE_PATH, DEFAULT_ALLOW_LAST_WILDCARD, DEFAULT_CONFIG_DIR, DEFAULT_FIRST_DEPTH,
                                 DEFAULT_FOLLOW_SYMLINKS, DEFAULT_MAX_SUGGESTIONS, DEFAULT_NEXT_DEPTH, ENV_KN_CONFIG,
                                 ENV_XDG_CONFIG_HOME)
from kn_common.core_utils import LOG
from kn_core.errors import InvalidArgValueError
from kn_core.sequence import SearchOpts


@dataclass(frozen=True)
class KnConfig:
    first_depth: Optional[int] = DEFAULT_FIRST_DEPTH
    next_depth: Optional[int] = DEFAULT_NEXT_DEPTH
    follow_symlinks: bool = DEFAULT_FOLLOW_SYMLINKS
    allow_last_wildcard: bool = DEFAULT_ALLOW_LAST_WILDCARD
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS

    def with_overrides(self, first_depth: Optional[int] = None, next_depth: Optional[int] = None) -> "KnConfig":
        """Apply CLI overrides. None keeps the configured value."""
        config = self
        if first_depth is not None:
            config = replace(config, first_depth=_check_depth("first_depth", first_depth))
        if next_depth is not None:
            config = replace(config, next_depth=_check_depth("next_depth", next_depth))
        return config

    def to_search_opts(self, start_dir: Path = Path(".")) -> SearchOpts:
        return SearchOpts(first_depth=self.first_depth, next_depth=self.next_depth, start_dir=start_dir)


def _check_depth(key: str, value: Any) -> Optional[int]:
    # bool is an int subclass, `first_depth: yes` is a typo not a depth
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidArgValueError(key, value)
    return value


def _check_bool(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise InvalidArgValueError(key, value)
    return value


def _check_positive(key: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidArgValueError(key, value)
    return value


_VALIDATORS = {
    "first_depth": _check_depth,
    "next_depth": _check_depth,
    "follow_symlinks": _check_bool,
    "allow_last_wildcard": _check_bool,
    "max_suggestions": _check_positive,
}


def resolve_config_path(explicit: Optional[str] = None) -> Path:
    """--config, then $KN_CONFIG, then $XDG_CONFIG_HOME/kn/config.yaml, then ~/.config/kn/config.yaml."""
    if explicit:
        return Path(explicit).expanduser()
    env_path = os.environ.get(ENV_KN_CONFIG)
    if env_path:
        return Path(env_path).expanduser()
    xdg_home = os.environ.get(ENV_XDG_CONFIG_HOME)
    config_dir = Path(xdg_home).expanduser() if xdg_home else DEFAULT_CONFIG_DIR
    return config_dir / CONFIG_RELATIVE_PATH


def config_from_dict(data: Dict[str, Any]) -> KnConfig:
    known = {f.name for f in fields(KnConfig)}
    values: Dict[str, Any] = {}
    for key, value in data.items():
        if key not in known:
            LOG(f"Ignoring unknown config key '{key}'", file=sys.stderr)
            continue
        values[key] = _VALIDATORS[key](key, value)
    return KnConfig(**values)


def load_config(path: Optional[Path] = None) -> KnConfig:
    """Read the YAML config. A missing file means defaults."""
    config_path = path or resolve_config_path()
    if not config_path.is_file():
        return KnConfig()

    with open(config_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidArgValueError(str(config_path), str(e)) from e

    if data is None:
        return KnConfig()
    if not isinstance(data, dict):
        raise InvalidArgValueError(str(config_path), data)
    return config_from_dict(data)
