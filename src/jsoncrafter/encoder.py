"""Encoder - turns a text node tree into the chat component JSON.

The output of :meth:`Encoder.encode` is a plain ``dict`` tree that
:func:`json.dumps` can serialize. Keys come out in a fixed order (content,
``with``, ``extra``, style keys, event keys) so the string form is stable
and can double as the node's identity for equality.

Unset attributes are always left out. The encoder never writes display
defaults such as ``"white"``; an absent key tells the client to inherit.
"""

from __future__ import annotations

import json
import math
from collections.abc import Iterable
from typing import Any, Optional

from jsoncrafter.content import KeybindContent, PlainContent, TranslateContent, stringify
from jsoncrafter.errors import CyclicStructureError, UnsupportedContentTypeError
from jsoncrafter.events import (
    ClickEvent,
    EventKind,
    HoverEvent,
    TextEvent,
    TooltipEntity,
    TooltipItem,
)
from jsoncrafter.text import TextNode, persuade

# Event keys, in the order they are emitted.
_EVENT_ORDER = (EventKind.CLICK, EventKind.HOVER)

# Nodes currently being encoded, outermost first.
_Path = tuple[TextNode, ...]


class Encoder:
    """Encode :class:`TextNode` trees.

    Usage::

        encoder = Encoder(indent=2)
        tree = encoder.encode(node)          # dict
        text = encoder.encode_string(node)   # JSON string
    """

    def __init__(self, *, indent: Optional[int] = None, ensure_ascii: bool = False) -> None:
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    # -- public API ---------------------------------------------------------

    def encode(self, node: TextNode) -> dict[str, Any]:
        """Return the JSON object for *node* and its whole subtree.

        Raises :class:`CyclicStructureError` if the tree reaches a node
        from inside itself, e.g. through a hover binding edited after it
        was attached.
        """
        return self._encode_node(node, ())

    def encode_string(self, node: TextNode) -> str:
        return self.dumps(self.encode(node))

    def encode_many(self, values: Iterable[Any]) -> list[Any]:
        """Persuade *values* into nodes and encode them as a JSON array.

        ``None`` values are skipped.
        """
        return [self.encode(persuade(v)) for v in values if v is not None]

    def dumps(self, json_obj: Any) -> str:
        if self.indent is None:
            return json.dumps(json_obj, separators=(",", ":"), ensure_ascii=self.ensure_ascii)
        return json.dumps(json_obj, indent=self.indent, ensure_ascii=self.ensure_ascii)

    def encode_value(self, value: Any) -> Any:
        """Encode a content value or translation argument.

        Raises :class:`UnsupportedContentTypeError` for anything that is
        not a JSON scalar, a text node, or a list/dict of those.
        """
        return self._encode_value(value, ())

    def encode_event(self, event: TextEvent) -> dict[str, Any]:
        """Encode a binding as ``{"action": ..., "value"|"contents": ...}``.

        A missing action or payload is left out rather than written as
        ``null``.
        """
        return self._encode_event(event, ())

    # -- nodes --------------------------------------------------------------

    def _encode_node(self, node: TextNode, path: _Path) -> dict[str, Any]:
        if any(n is node for n in path):
            raise CyclicStructureError("a text node cannot contain itself")
        path += (node,)

        json_obj: dict[str, Any] = {}
        self._encode_content(node, json_obj, path)

        if node.children:
            json_obj["extra"] = [self._encode_node(child, path) for child in node.children]

        json_obj.update(node.style.set_fields())

        for kind in _EVENT_ORDER:
            event = node.get_event(kind)
            if event is not None:
                json_obj[kind.key] = self._encode_event(event, path)
        return json_obj

    def _encode_content(self, node: TextNode, json_obj: dict[str, Any], path: _Path) -> None:
        content = node.content
        key = node.content_type.key
        if isinstance(content, PlainContent):
            json_obj[key] = self._encode_value(content.value, path)
        elif isinstance(content, TranslateContent):
            json_obj[key] = content.key
            if content.args:
                json_obj["with"] = [self._encode_value(arg, path) for arg in content.args]
        elif isinstance(content, KeybindContent):
            json_obj[key] = content.keybind
        else:
            raise UnsupportedContentTypeError(content)

    def _encode_value(self, value: Any, path: _Path) -> Any:
        if isinstance(value, TextNode):
            return self._encode_node(value, path)
        if isinstance(value, (bool, int, str)):
            return value
        if isinstance(value, float):
            if not math.isfinite(value):
                raise UnsupportedContentTypeError(value)
            return value
        if isinstance(value, (list, tuple)):
            return [self._encode_value(v, path) for v in value]
        if isinstance(value, dict):
            encoded: dict[str, Any] = {}
            for k, v in value.items():
                if not isinstance(k, str):
                    raise UnsupportedContentTypeError(k)
                encoded[k] = self._encode_value(v, path)
            return encoded
        raise UnsupportedContentTypeError(value)

    # -- events -------------------------------------------------------------

    def _encode_event(self, event: TextEvent, path: _Path) -> dict[str, Any]:
        json_obj: dict[str, Any] = {}
        if event.action is not None:
            json_obj["action"] = event.action.value
        if isinstance(event, ClickEvent):
            if event.value is not None:
                json_obj["value"] = event.value
        elif isinstance(event, HoverEvent):
            contents = self._encode_contents(event.contents, path)
            if contents is not None:
                json_obj["contents"] = contents
        return json_obj

    def _encode_contents(self, contents: Any, path: _Path) -> Any:
        if contents is None:
            return None
        if isinstance(contents, list):
            if not contents:
                return None
            # One line is inlined, two or more become an array.
            if len(contents) == 1:
                return self._encode_node(contents[0], path)
            return [self._encode_node(text, path) for text in contents]
        if isinstance(contents, TooltipItem):
            return self._encode_item(contents)
        if isinstance(contents, TooltipEntity):
            return self._encode_entity(contents, path)
        raise UnsupportedContentTypeError(contents)

    def _encode_item(self, item: TooltipItem) -> dict[str, Any]:
        json_obj: dict[str, Any] = {}
        if item.id is not None:
            json_obj["id"] = item.id
        if item.count is not None:
            json_obj["count"] = item.count
        if item.tag is not None:
            json_obj["tag"] = item.tag
        return json_obj

    def _encode_entity(self, entity: TooltipEntity, path: _Path) -> dict[str, Any]:
        json_obj: dict[str, Any] = {}
        if entity.name is not None:
            json_obj["name"] = self._encode_value(entity.name, path)
        if entity.type is not None:
            json_obj["type"] = entity.type
        json_obj["id"] = str(entity.id)
        return json_obj


# ---------------------------------------------------------------------------
# Module-level helpers
# ---------------------------------------------------------------------------

_default_encoder = Encoder()


def encode(node: TextNode) -> dict[str, Any]:
    return _default_encoder.encode(node)


def encode_string(node: TextNode) -> str:
    """Canonical compact JSON string of *node*."""
    return _default_encoder.encode_string(node)


def to_json(values: Iterable[Any]) -> list[Any]:
    """Encode a mix of nodes and plain values as a JSON array."""
    return _default_encoder.encode_many(values)


def to_string(values: Iterable[Any]) -> str:
    return _default_encoder.dumps(to_json(values))


def get_contents(values: Iterable[Any], delimiter: Optional[str] = None) -> str:
    """Join the raw content of each value, as plain text.

    Values are persuaded into nodes first; ``None`` values are skipped.
    Only each node's own content is used, not its children.
    """
    parts = []
    for value in values:
        node = persuade(value)
        if node is not None:
            parts.append(stringify(node.content_value))
    return (delimiter or "").join(parts)
