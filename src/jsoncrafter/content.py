"""Content variants of a text node.

A node carries exactly one of three payloads, chosen when the node is
built:

* :class:`PlainContent` - a literal value written under ``text``.
* :class:`TranslateContent` - a translation key under ``translate`` plus
  ordered substitution arguments under ``with``.
* :class:`KeybindContent` - a control binding name under ``keybind``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from jsoncrafter.errors import InvalidArgumentError, UnsupportedContentTypeError


class ContentType(Enum):
    PLAIN = "text"
    TRANSLATE = "translate"
    KEYBIND = "keybind"

    @property
    def key(self) -> str:
        """JSON key the content is written under."""
        return self.value


SCALAR_TYPES = (bool, int, float, str)


def stringify(value: Any) -> str:
    """String form of a value as the client would show it."""
    from jsoncrafter.text import TextNode

    if isinstance(value, TextNode):
        return value.to_plain_text()
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def check_json_value(value: Any) -> Any:
    """Return *value* if the encoder can represent it, else raise.

    Accepted: JSON scalars, text nodes, and lists/tuples/dicts (string
    keys) built from the same.
    """
    from jsoncrafter.text import TextNode

    if isinstance(value, (SCALAR_TYPES, TextNode)):
        return value
    if isinstance(value, (list, tuple)):
        for item in value:
            check_json_value(item)
        return value
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise UnsupportedContentTypeError(key)
            check_json_value(item)
        return value
    raise UnsupportedContentTypeError(value)


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------

@dataclass
class PlainContent:
    """Literal value; its type is only checked when encoded."""

    value: Any

    content_type = ContentType.PLAIN

    def __post_init__(self) -> None:
        if self.value is None:
            raise InvalidArgumentError("plain content must not be None")

    def preview(self) -> str:
        return stringify(self.value)


@dataclass
class TranslateContent:
    key: str
    args: list[Any] = field(default_factory=list)

    content_type = ContentType.TRANSLATE

    def __post_init__(self) -> None:
        if not isinstance(self.key, str):
            raise InvalidArgumentError(f"translation key must be a string, got {self.key!r}")
        self.args = [check_json_value(arg) for arg in self.args]

    def preview(self) -> str:
        return format_translation(self.key, self.args)


@dataclass
class KeybindContent:
    keybind: str

    content_type = ContentType.KEYBIND

    def __post_init__(self) -> None:
        if not isinstance(self.keybind, str):
            raise InvalidArgumentError(f"keybind must be a string, got {self.keybind!r}")

    def preview(self) -> str:
        return self.keybind


ContentVariant = Union[PlainContent, TranslateContent, KeybindContent]


# ---------------------------------------------------------------------------
# Translation preview
# ---------------------------------------------------------------------------

_PLACEHOLDER = re.compile(r"%(?:(\d+)\$)?([sd%])")


def format_translation(key: str, args: list[Any] | tuple[Any, ...]) -> str:
    """Fill ``%s``/``%d``/``%1$s`` placeholders in *key* for local preview.

    Missing arguments render as an empty string and extra arguments are
    ignored. This is not what the client does with a real language file;
    it only gives a rough idea of the final text.
    """
    position = 0

    def _sub(match: re.Match[str]) -> str:
        nonlocal position
        index, conversion = match.groups()
        if conversion == "%":
            return "%"
        if index is not None:
            i = int(index) - 1
        else:
            i = position
            position += 1
        if 0 <= i < len(args):
            return stringify(args[i])
        return ""

    return _PLACEHOLDER.sub(_sub, key)
