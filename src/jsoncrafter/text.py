"""The text node model.

A :class:`TextNode` is one run of styled content with optional click and
hover bindings and an ordered list of child runs (``extra``). Nodes are
built through one of the content constructors and then decorated with
chained setters::

    msg = TranslatedText("%s joined the game", "Whirvis").set_color("yellow")
    msg.add_children(PlainText(" [info]").set_event(ClickEvent.run_command("/info")))
    msg.to_json()

The child tree is acyclic. There are no parent pointers; a node
being attached is walked to make sure the receiver is not already inside
it.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional, Union

from jsoncrafter.content import (
    ContentType,
    ContentVariant,
    KeybindContent,
    PlainContent,
    TranslateContent,
    stringify,
)
from jsoncrafter.errors import CyclicStructureError, InvalidArgumentError
from jsoncrafter.events import EventKind, HoverEvent, TextEvent
from jsoncrafter.style import ColorLike, StyleAttributes


class TextNode:
    """A styled text component and its children."""

    def __init__(self, content: ContentVariant) -> None:
        self._content = content
        self.style = StyleAttributes()
        self._children: list[TextNode] = []
        self._events: dict[EventKind, TextEvent] = {}

    # -- content ------------------------------------------------------------

    @property
    def content_type(self) -> ContentType:
        return self._content.content_type

    @property
    def content(self) -> ContentVariant:
        return self._content

    @property
    def content_value(self) -> Any:
        """The raw value written under the content key."""
        c = self._content
        if isinstance(c, PlainContent):
            return c.value
        if isinstance(c, TranslateContent):
            return c.key
        return c.keybind

    # -- children -----------------------------------------------------------

    @property
    def children(self) -> tuple[TextNode, ...]:
        return tuple(self._children)

    def add_children(self, *nodes: TextNode) -> TextNode:
        """Append *nodes* to ``extra``, in order.

        Raises :class:`CyclicStructureError` if this node is any of *nodes*
        or sits anywhere inside one of them. Nothing is appended on failure.
        """
        for node in nodes:
            self._check_attachable(node)
        self._children.extend(nodes)
        return self

    def remove_children(self, *nodes: TextNode) -> TextNode:
        """Remove children by identity. Unknown nodes are ignored."""
        doomed = {id(n) for n in nodes}
        self._children = [c for c in self._children if id(c) not in doomed]
        return self

    def clear_children(self) -> TextNode:
        self._children.clear()
        return self

    def _check_attachable(self, node: Any) -> None:
        if not isinstance(node, TextNode):
            raise InvalidArgumentError(f"expected a TextNode, got {node!r}")
        if any(n is self for n in node.walk()):
            raise CyclicStructureError("a text node cannot contain itself")

    def walk(self) -> Iterator[TextNode]:
        """Yield this node and every node reachable from it, depth-first.

        Covers everything the encoder recurses into. Raises
        :class:`CyclicStructureError` if a node is reached from itself.
        """
        return self._walk(())

    def _walk(self, path: tuple[TextNode, ...]) -> Iterator[TextNode]:
        if any(n is self for n in path):
            raise CyclicStructureError("a text node cannot contain itself")
        yield self
        path += (self,)
        for node in self._nested():
            yield from node._walk(path)

    def _nested(self) -> Iterator[TextNode]:
        c = self._content
        if isinstance(c, PlainContent):
            yield from nodes_in(c.value)
        elif isinstance(c, TranslateContent):
            for arg in c.args:
                yield from nodes_in(arg)
        hover = self._events.get(EventKind.HOVER)
        if isinstance(hover, HoverEvent):
            yield from hover.text_nodes()
        yield from self._children

    # -- style --------------------------------------------------------------

    def set_color(self, color: ColorLike) -> TextNode:
        """Set the colour by name, ``#rrggbb`` string, RGB int or :class:`ChatColor`."""
        self.style.set("color", color)
        return self

    def set_font(self, font: Optional[str]) -> TextNode:
        self.style.set("font", font)
        return self

    def set_bold(self, bold: Optional[bool]) -> TextNode:
        self.style.set("bold", bold)
        return self

    def set_italic(self, italic: Optional[bool]) -> TextNode:
        self.style.set("italic", italic)
        return self

    def set_underlined(self, underlined: Optional[bool]) -> TextNode:
        self.style.set("underlined", underlined)
        return self

    def set_strikethrough(self, strikethrough: Optional[bool]) -> TextNode:
        self.style.set("strikethrough", strikethrough)
        return self

    def set_obfuscated(self, obfuscated: Optional[bool]) -> TextNode:
        self.style.set("obfuscated", obfuscated)
        return self

    def set_insertion(self, insertion: Optional[str]) -> TextNode:
        """Text put in the chat box when the player shift-clicks this run."""
        self.style.set("insertion", insertion)
        return self

    def set_style(self, **values: Any) -> TextNode:
        self.style.update(**values)
        return self

    def apply_style(self, style: StyleAttributes) -> TextNode:
        """Copy every field that is set on *style*."""
        self.style.update(**style.set_fields())
        return self

    # Display accessors fall back to in-game defaults; they never feed
    # the encoder.

    @property
    def color(self) -> str:
        return self.style.resolve("color")

    @property
    def font(self) -> str:
        return self.style.resolve("font")

    @property
    def bold(self) -> bool:
        return self.style.resolve("bold")

    @property
    def italic(self) -> bool:
        return self.style.resolve("italic")

    @property
    def underlined(self) -> bool:
        return self.style.resolve("underlined")

    @property
    def strikethrough(self) -> bool:
        return self.style.resolve("strikethrough")

    @property
    def obfuscated(self) -> bool:
        return self.style.resolve("obfuscated")

    @property
    def insertion(self) -> str:
        return self.style.resolve("insertion")

    # -- events -------------------------------------------------------------

    @property
    def events(self) -> tuple[TextEvent, ...]:
        return tuple(self._events.values())

    def set_event(self, event: TextEvent) -> TextNode:
        """Attach *event*, replacing any binding of the same kind."""
        if not isinstance(event, TextEvent):
            raise InvalidArgumentError(f"expected a TextEvent, got {event!r}")
        if isinstance(event, HoverEvent):
            for node in event.text_nodes():
                self._check_attachable(node)
        self._events[event.kind] = event
        return self

    def remove_event(self, event: Union[TextEvent, EventKind]) -> TextNode:
        """Detach a binding by kind, or only if it is this exact binding."""
        if isinstance(event, EventKind):
            self._events.pop(event, None)
        elif self._events.get(event.kind) is event:
            del self._events[event.kind]
        return self

    def get_event(self, kind: EventKind) -> Optional[TextEvent]:
        return self._events.get(kind)

    def has_event(self, kind: EventKind) -> bool:
        return kind in self._events

    def has_events(self) -> bool:
        return bool(self._events)

    # -- output -------------------------------------------------------------

    def to_json(self) -> dict[str, Any]:
        """Encode this node and its subtree."""
        from jsoncrafter.encoder import encode

        return encode(self)

    def to_plain_text(self) -> str:
        """Flatten content and children into a display string."""
        parts = [self._content.preview()]
        parts.extend(child.to_plain_text() for child in self._children)
        return "".join(parts)

    def __str__(self) -> str:
        from jsoncrafter.encoder import encode_string

        return encode_string(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.content_value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextNode):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))


# ---------------------------------------------------------------------------
# Constructors per content type
# ---------------------------------------------------------------------------

class PlainText(TextNode):
    """Literal text (or any JSON value) written under ``text``."""

    def __init__(self, value: Any) -> None:
        super().__init__(PlainContent(value))

    def set_content(self, value: Any) -> PlainText:
        content = PlainContent(value)
        for node in nodes_in(value):
            self._check_attachable(node)
        self._content = content
        return self


class TranslatedText(TextNode):
    """A translation key resolved by the client, with ordered arguments."""

    def __init__(self, key: str, *args: Any) -> None:
        super().__init__(TranslateContent(key, list(args)))

    @property
    def key(self) -> str:
        return self._content.key

    @property
    def args(self) -> tuple[Any, ...]:
        return tuple(self._content.args)

    def set_translation(self, key: str, *args: Any) -> TranslatedText:
        content = TranslateContent(key, list(args))
        self._check_args(content)
        self._content = content
        return self

    def set_with(self, *args: Any) -> TranslatedText:
        return self.set_translation(self._content.key, *args)

    def get_translation(self) -> str:
        """Preview of the translated text with arguments filled in."""
        return self._content.preview()

    def _check_args(self, content: TranslateContent) -> None:
        for arg in content.args:
            for node in nodes_in(arg):
                self._check_attachable(node)


class KeybindText(TextNode):
    """The key currently bound to a control, e.g. ``key.jump``."""

    def __init__(self, keybind: str) -> None:
        super().__init__(KeybindContent(keybind))

    @property
    def keybind(self) -> str:
        return self._content.keybind


# ---------------------------------------------------------------------------
# Persuasion
# ---------------------------------------------------------------------------

def persuade(value: Any) -> Optional[TextNode]:
    """Return *value* if it is a node, else wrap its string form as plain text.

    ``None`` stays ``None``; callers that take sequences skip it.
    """
    if value is None:
        return None
    if isinstance(value, TextNode):
        return value
    return PlainText(stringify(value))


def persuade_all(values: Iterable[Any]) -> list[TextNode]:
    """Persuade every non-``None`` value in *values*."""
    return [persuade(v) for v in values if v is not None]


def nodes_in(value: Any) -> Iterator[TextNode]:
    """Yield the text nodes held in a content value, looking inside lists and dicts."""
    if isinstance(value, TextNode):
        yield value
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from nodes_in(item)
    elif isinstance(value, dict):
        for item in value.values():
            yield from nodes_in(item)
