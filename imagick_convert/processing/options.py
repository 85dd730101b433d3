"""
Ordered option storage for convert commands.

Options are kept in a dict, so re-adding a key replaces its value but keeps
the position it was first inserted at. Filters are raw tokens emitted right
before the flag of the option they belong to.
"""

import shlex
from typing import Any, Dict, Iterator, List, Optional

from ..core.types import CommandOption


def format_value(value: Any) -> Optional[str]:
    """Render an option value as a single command-line token."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def command_string(tokens: List[str]) -> str:
    """Shell-quote every token and follow each with a single space."""
    return "".join(f"{shlex.quote(token)} " for token in tokens)


class CommandOptions:
    """Insertion-ordered mapping of option key -> value, plus per-key filters."""

    def __init__(self):
        self._options: Dict[str, Optional[str]] = {}
        self._filters: Dict[str, List[str]] = {}

    def add_option(self, key: str, value: Any = None) -> "CommandOptions":
        """Insert or overwrite an option. Overwrites keep the original position."""
        self._options[key] = format_value(value)
        return self

    def add_filter(self, key: str, fragment: str) -> "CommandOptions":
        """Append a raw fragment to be emitted before the '-key' flag."""
        self._filters.setdefault(key, []).append(fragment)
        return self

    def get_filters(self, key: str) -> List[str]:
        """Return the filters registered for an option (empty if none)."""
        return list(self._filters.get(key, []))

    def get_option(self, key: str) -> Optional[CommandOption]:
        """Get an option by key."""
        if key not in self._options:
            return None
        return CommandOption(key=key, value=self._options[key])

    def keys(self) -> List[str]:
        return list(self._options)

    def clear(self) -> None:
        """Remove all options and filters."""
        self._options.clear()
        self._filters.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._options

    def __len__(self) -> int:
        return len(self._options)

    def __iter__(self) -> Iterator[CommandOption]:
        for key, value in self._options.items():
            yield CommandOption(key=key, value=value)

    def to_args(self) -> List[str]:
        """Flatten to argument tokens: filters, '-key', then the value if any."""
        args: List[str] = []
        for option in self:
            args.extend(self._filters.get(option.key, []))
            args.append(f"-{option.key}")
            if not option.is_flag:
                args.append(option.value)
        return args

    def __str__(self) -> str:
        return command_string(self.to_args())
