"""jsoncrafter - build chat component JSON from styled text trees."""

from jsoncrafter.encoder import Encoder, encode, encode_string, get_contents, to_json, to_string
from jsoncrafter.errors import (
    CyclicStructureError,
    InvalidArgumentError,
    JsonCrafterError,
    UnsupportedActionError,
    UnsupportedContentTypeError,
)
from jsoncrafter.events import (
    ClickAction,
    ClickEvent,
    EventKind,
    HoverAction,
    HoverEvent,
    TooltipEntity,
    TooltipItem,
)
from jsoncrafter.formatting import ChatColor
from jsoncrafter.style import StyleAttributes
from jsoncrafter.text import KeybindText, PlainText, TextNode, TranslatedText, persuade, persuade_all

__version__ = "0.1.0"

__all__ = [
    "ChatColor",
    "ClickAction",
    "ClickEvent",
    "CyclicStructureError",
    "Encoder",
    "EventKind",
    "HoverAction",
    "HoverEvent",
    "InvalidArgumentError",
    "JsonCrafterError",
    "KeybindText",
    "PlainText",
    "StyleAttributes",
    "TextNode",
    "TooltipEntity",
    "TooltipItem",
    "TranslatedText",
    "UnsupportedActionError",
    "UnsupportedContentTypeError",
    "encode",
    "encode_string",
    "get_contents",
    "persuade",
    "persuade_all",
    "to_json",
    "to_string",
]
