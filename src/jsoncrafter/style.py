"""Visual and interactive attributes attached to a text node.

Every field is tri-state: ``None`` means unset and is left out of the
encoded JSON, so the client falls back to whatever the parent or its own
defaults say.
"""

from __future__ import annotations

from copy import copy
from dataclasses import dataclass, fields
from typing import Any, Optional, Union

from jsoncrafter.errors import InvalidArgumentError
from jsoncrafter.formatting import TEXT_DEFAULTS, ChatColor

ColorLike = Union[str, int, ChatColor, None]

# Wire keys, in the order the encoder emits them.
STYLE_KEYS = (
    "color",
    "font",
    "bold",
    "italic",
    "underlined",
    "strikethrough",
    "obfuscated",
    "insertion",
)

_BOOL_KEYS = frozenset(STYLE_KEYS[2:7])
_STR_KEYS = frozenset(("font", "insertion"))


def normalize_color(color: ColorLike) -> Optional[str]:
    """Convert any accepted colour form to its wire string.

    ``int`` values become lowercase ``#rrggbb``; :class:`ChatColor` members
    become their name and must be a colour rather than a format code.
    Strings pass through untouched.
    """
    if color is None or isinstance(color, str):
        return color
    if isinstance(color, ChatColor):
        if not color.is_color:
            raise InvalidArgumentError(f"{color.label!r} is not a color")
        return color.label
    if isinstance(color, int) and not isinstance(color, bool):
        if not 0 <= color <= 0xFFFFFF:
            raise InvalidArgumentError(f"rgb value out of range: {color:#x}")
        return f"#{color:06x}"
    raise InvalidArgumentError(f"invalid color: {color!r}")


def _check_field(key: str, value: Any) -> Any:
    if key == "color":
        return normalize_color(value)
    if value is None:
        return None
    if key in _BOOL_KEYS and not isinstance(value, bool):
        raise InvalidArgumentError(f"{key} must be a bool, got {type(value).__name__}")
    if key in _STR_KEYS and not isinstance(value, str):
        raise InvalidArgumentError(f"{key} must be a string, got {type(value).__name__}")
    return value


@dataclass
class StyleAttributes:
    """Optional style fields of a text node."""

    color: Optional[str] = None
    font: Optional[str] = None
    bold: Optional[bool] = None
    italic: Optional[bool] = None
    underlined: Optional[bool] = None
    strikethrough: Optional[bool] = None
    obfuscated: Optional[bool] = None
    insertion: Optional[str] = None

    def __post_init__(self) -> None:
        for f in fields(self):
            setattr(self, f.name, _check_field(f.name, getattr(self, f.name)))

    # -- mutation -----------------------------------------------------------

    def set(self, key: str, value: Any) -> None:
        """Set (or with ``None`` unset) a single field by wire name."""
        if key not in STYLE_KEYS:
            raise InvalidArgumentError(f"unknown style attribute {key!r}")
        setattr(self, key, _check_field(key, value))

    def update(self, **values: Any) -> None:
        """Set several fields at once; nothing changes if any value is bad."""
        checked = {}
        for key, value in values.items():
            if key not in STYLE_KEYS:
                raise InvalidArgumentError(f"unknown style attribute {key!r}")
            checked[key] = _check_field(key, value)
        for key, value in checked.items():
            setattr(self, key, value)

    def derive(self, **overrides: Any) -> StyleAttributes:
        """Return a copy with selected fields overridden."""
        clone = copy(self)
        clone.update(**overrides)
        return clone

    def merged(self, other: StyleAttributes) -> StyleAttributes:
        """Return a copy where every field set on *other* wins."""
        return self.derive(**other.set_fields())

    # -- queries ------------------------------------------------------------

    def set_fields(self) -> dict[str, Any]:
        """Explicitly set fields, in wire order."""
        result: dict[str, Any] = {}
        for key in STYLE_KEYS:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        return result

    def is_set(self, key: str) -> bool:
        return getattr(self, key) is not None

    def is_empty(self) -> bool:
        return not self.set_fields()

    def resolve(self, key: str) -> Any:
        """Display value of *key*, falling back to the in-game default."""
        value = getattr(self, key)
        return TEXT_DEFAULTS[key] if value is None else value
