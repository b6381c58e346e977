from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class ToolTemplate:
    """One runnable usage example shown in `--help`."""
    name: str
    command: str
    extra_description: str = ""
    args: Dict[str, Any] = field(default_factory=dict)  # {arg_name: arg_value}
    positionals: List[str] = field(default_factory=list)
