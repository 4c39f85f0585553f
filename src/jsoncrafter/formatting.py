"""Colour names, legacy format codes and in-game display defaults.

The tables here are read-only lookups for display helpers. The encoder
never consults them: an unset attribute is left out of the JSON so the
client applies its own default.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Optional


class ChatColor(Enum):
    """Named colours and formatting codes understood by the client."""

    BLACK = ("black", "0", True)
    DARK_BLUE = ("dark_blue", "1", True)
    DARK_GREEN = ("dark_green", "2", True)
    DARK_AQUA = ("dark_aqua", "3", True)
    DARK_RED = ("dark_red", "4", True)
    DARK_PURPLE = ("dark_purple", "5", True)
    GOLD = ("gold", "6", True)
    GRAY = ("gray", "7", True)
    DARK_GRAY = ("dark_gray", "8", True)
    BLUE = ("blue", "9", True)
    GREEN = ("green", "a", True)
    AQUA = ("aqua", "b", True)
    RED = ("red", "c", True)
    LIGHT_PURPLE = ("light_purple", "d", True)
    YELLOW = ("yellow", "e", True)
    WHITE = ("white", "f", True)
    OBFUSCATED = ("obfuscated", "k", False)
    BOLD = ("bold", "l", False)
    STRIKETHROUGH = ("strikethrough", "m", False)
    UNDERLINE = ("underline", "n", False)
    ITALIC = ("italic", "o", False)
    RESET = ("reset", "r", False)

    def __init__(self, label: str, code: str, is_color: bool) -> None:
        self.label = label
        self.code = code
        self.is_color = is_color

    @property
    def legacy(self) -> str:
        """Section-sign prefixed legacy code, e.g. ``"§a"``."""
        return f"§{self.code}"

    @classmethod
    def from_name(cls, name: str) -> Optional[ChatColor]:
        """Look up a member by its lowercase wire name, or ``None``."""
        return _BY_LABEL.get(name.lower())

    @classmethod
    def from_code(cls, code: str) -> Optional[ChatColor]:
        return _BY_CODE.get(code.lower())

    @classmethod
    def colors(cls) -> list[ChatColor]:
        return [c for c in cls if c.is_color]


_BY_LABEL = {c.label: c for c in ChatColor}
_BY_CODE = {c.code: c for c in ChatColor}


def is_color_name(name: str) -> bool:
    """Return True if *name* is one of the sixteen named colours."""
    member = ChatColor.from_name(name)
    return member is not None and member.is_color


# ---------------------------------------------------------------------------
# Display defaults
# ---------------------------------------------------------------------------

TEXT_DEFAULTS = MappingProxyType({
    "color": "white",
    "font": "minecraft:default",
    "bold": False,
    "italic": False,
    "underlined": False,
    "strikethrough": False,
    "obfuscated": False,
    "insertion": "",
})

ITEM_DEFAULTS = MappingProxyType({
    "id": "minecraft:air",
    "count": 1,
})

ENTITY_DEFAULTS = MappingProxyType({
    "type": "minecraft:pig",
})
