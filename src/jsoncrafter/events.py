"""Click and hover bindings attached to text nodes.

A node holds at most one binding per :class:`EventKind`. The action of a
binding is checked against the kind's whitelist as soon as it is set, and
the payload must fit the action::

    ClickEvent.open_url("https://example.com")
    HoverEvent().show("line one", PlainText("line two").set_bold(True))
    HoverEvent().show(TooltipItem("minecraft:diamond_sword", 1))
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Optional, Union
from urllib.parse import urlparse

from jsoncrafter.errors import InvalidArgumentError, UnsupportedActionError
from jsoncrafter.formatting import ENTITY_DEFAULTS, ITEM_DEFAULTS


class EventKind(Enum):
    CLICK = "clickEvent"
    HOVER = "hoverEvent"

    @property
    def key(self) -> str:
        return self.value


class ClickAction(Enum):
    OPEN_URL = "open_url"
    RUN_COMMAND = "run_command"
    SUGGEST_COMMAND = "suggest_command"
    CHANGE_PAGE = "change_page"
    COPY_TO_CLIPBOARD = "copy_to_clipboard"


class HoverAction(Enum):
    SHOW_TEXT = "show_text"
    SHOW_ITEM = "show_item"
    SHOW_ENTITY = "show_entity"


def _check_url(url: Any) -> str:
    if not isinstance(url, str):
        raise InvalidArgumentError(f"url must be a string, got {url!r}")
    parsed = urlparse(url)
    if not parsed.scheme or not parsed.netloc:
        raise InvalidArgumentError(f"malformed url: {url!r}")
    return url


def _check_page(page: Any) -> int:
    if isinstance(page, bool) or not isinstance(page, int):
        raise InvalidArgumentError(f"page must be an int, got {page!r}")
    if page < 0:
        raise InvalidArgumentError("page < 0")
    return page


# ---------------------------------------------------------------------------
# Base binding
# ---------------------------------------------------------------------------

class TextEvent(ABC):
    """Common state of a binding: its kind, action and payload."""

    kind: EventKind
    actions: type[Enum]

    def __init__(self, action: Union[Enum, str, None] = None) -> None:
        self._action: Optional[Enum] = None
        self._value: Any = None
        if action is not None:
            self.set_action(action)

    @property
    def action(self) -> Optional[Enum]:
        return self._action

    @property
    def value(self) -> Any:
        return self._value

    def supports_action(self, action: Union[Enum, str]) -> bool:
        try:
            self._coerce_action(action)
        except UnsupportedActionError:
            return False
        return True

    def set_action(self, action: Union[Enum, str, None]) -> TextEvent:
        """Set the action, or clear it with ``None``.

        Raises :class:`UnsupportedActionError` for an action outside this
        kind's whitelist and :class:`InvalidArgumentError` if the current
        payload does not suit the new action.
        """
        coerced = None if action is None else self._coerce_action(action)
        self._check_payload(coerced, self._value)
        self._action = coerced
        return self

    def set_value(self, value: Any) -> TextEvent:
        self._check_payload(self._action, value)
        self._value = value
        return self

    def clear_value(self) -> TextEvent:
        self._value = None
        return self

    def _coerce_action(self, action: Union[Enum, str]) -> Enum:
        if isinstance(action, self.actions):
            return action
        if isinstance(action, str):
            try:
                return self.actions(action)
            except ValueError:
                pass
        raise UnsupportedActionError(self.kind.key, action)

    @abstractmethod
    def _check_payload(self, action: Optional[Enum], value: Any) -> None:
        """Raise InvalidArgumentError unless *value* suits *action*."""

    def __repr__(self) -> str:
        action = self._action.value if self._action else None
        return f"{type(self).__name__}(action={action!r}, value={self._value!r})"


# ---------------------------------------------------------------------------
# Click
# ---------------------------------------------------------------------------

class ClickEvent(TextEvent):
    """Binding triggered when the player clicks the text."""

    kind = EventKind.CLICK
    actions = ClickAction

    @classmethod
    def open_url(cls, url: str) -> ClickEvent:
        return cls(ClickAction.OPEN_URL).set_url(url)

    @classmethod
    def run_command(cls, command: str) -> ClickEvent:
        return cls(ClickAction.RUN_COMMAND).set_text(command)

    @classmethod
    def suggest_command(cls, command: str) -> ClickEvent:
        return cls(ClickAction.SUGGEST_COMMAND).set_text(command)

    @classmethod
    def change_page(cls, page: int) -> ClickEvent:
        return cls(ClickAction.CHANGE_PAGE).set_page(page)

    @classmethod
    def copy_to_clipboard(cls, text: str) -> ClickEvent:
        return cls(ClickAction.COPY_TO_CLIPBOARD).set_text(text)

    def set_text(self, text: Optional[str]) -> ClickEvent:
        if text is not None and not isinstance(text, str):
            raise InvalidArgumentError(f"text must be a string, got {text!r}")
        return self.set_value(text)

    def set_url(self, url: Optional[str]) -> ClickEvent:
        if url is not None:
            _check_url(url)
        return self.set_value(url)

    def set_page(self, page: Optional[int]) -> ClickEvent:
        if page is not None:
            _check_page(page)
        return self.set_value(page)

    def _check_payload(self, action: Optional[Enum], value: Any) -> None:
        if value is None:
            return
        if action is ClickAction.OPEN_URL:
            _check_url(value)
        elif action is ClickAction.CHANGE_PAGE:
            _check_page(value)
        elif action is None:
            if not isinstance(value, str):
                _check_page(value)
        elif not isinstance(value, str):
            raise InvalidArgumentError(f"{action.value} expects a string, got {value!r}")


# ---------------------------------------------------------------------------
# Hover
# ---------------------------------------------------------------------------

class TooltipItem:
    """Item shown by a ``show_item`` hover."""

    action = HoverAction.SHOW_ITEM

    def __init__(
        self,
        id: Optional[str] = None,
        count: Optional[int] = None,
        tag: Optional[str] = None,
    ) -> None:
        self.id: Optional[str] = None
        self.count: Optional[int] = None
        self.tag: Optional[str] = None
        self.set_id(id)
        self.set_count(count)
        self.set_tag(tag)

    def set_id(self, id: Optional[str]) -> TooltipItem:
        if id is not None and not isinstance(id, str):
            raise InvalidArgumentError(f"item id must be a string, got {id!r}")
        self.id = id
        return self

    def set_count(self, count: Optional[int]) -> TooltipItem:
        if count is not None and (isinstance(count, bool) or not isinstance(count, int)):
            raise InvalidArgumentError(f"item count must be an int, got {count!r}")
        self.count = count
        return self

    def set_tag(self, tag: Optional[str]) -> TooltipItem:
        """Set the item NBT as an opaque SNBT string."""
        if tag is not None and not isinstance(tag, str):
            raise InvalidArgumentError(f"item tag must be a string, got {tag!r}")
        self.tag = tag
        return self

    def resolve(self, key: str) -> Any:
        value = getattr(self, key)
        return ITEM_DEFAULTS.get(key) if value is None else value

    def __repr__(self) -> str:
        return f"TooltipItem(id={self.id!r}, count={self.count!r}, tag={self.tag!r})"


class TooltipEntity:
    """Entity shown by a ``show_entity`` hover."""

    action = HoverAction.SHOW_ENTITY

    def __init__(
        self,
        id: Union[uuid.UUID, str],
        type: Optional[str] = None,
        name: Any = None,
    ) -> None:
        self.id: uuid.UUID = self._parse_id(id)
        self.type: Optional[str] = None
        self.name: Any = None
        self.set_type(type)
        self.set_name(name)

    @staticmethod
    def _parse_id(value: Union[uuid.UUID, str]) -> uuid.UUID:
        if isinstance(value, uuid.UUID):
            return value
        if not isinstance(value, str):
            raise InvalidArgumentError(f"entity id must be a UUID, got {value!r}")
        try:
            return uuid.UUID(value)
        except ValueError as exc:
            raise InvalidArgumentError(f"malformed UUID: {value!r}") from exc

    def set_id(self, id: Union[uuid.UUID, str]) -> TooltipEntity:
        self.id = self._parse_id(id)
        return self

    def set_type(self, type: Optional[str]) -> TooltipEntity:
        if type is not None and not isinstance(type, str):
            raise InvalidArgumentError(f"entity type must be a string, got {type!r}")
        self.type = type
        return self

    def set_name(self, name: Any) -> TooltipEntity:
        """Set the display name: a string or a text node."""
        from jsoncrafter.text import TextNode

        if name is not None and not isinstance(name, (str, TextNode)):
            raise InvalidArgumentError(f"entity name must be text, got {name!r}")
        self.name = name
        return self

    def resolve(self, key: str) -> Any:
        value = getattr(self, key)
        return ENTITY_DEFAULTS.get(key) if value is None else value

    def __repr__(self) -> str:
        return f"TooltipEntity(id={str(self.id)!r}, type={self.type!r}, name={self.name!r})"


Tooltip = Union[TooltipItem, TooltipEntity]


class HoverEvent(TextEvent):
    """Binding triggered when the player hovers over the text."""

    kind = EventKind.HOVER
    actions = HoverAction

    def show(self, *values: Any) -> HoverEvent:
        """Show a tooltip.

        A single :class:`TooltipItem` or :class:`TooltipEntity` selects
        ``show_item``/``show_entity``. Anything else is persuaded into text
        nodes for ``show_text``; list and tuple arguments contribute one
        line per item, and ``None`` values are skipped.
        """
        from jsoncrafter.text import persuade

        if len(values) == 1 and isinstance(values[0], (TooltipItem, TooltipEntity)):
            tooltip = values[0]
            self._action = tooltip.action
            self._value = tooltip
            return self

        texts = []
        for value in values:
            items = value if isinstance(value, (list, tuple)) else (value,)
            texts.extend(persuade(v) for v in items if v is not None)
        self._action = HoverAction.SHOW_TEXT
        self._value = texts or None
        return self

    @property
    def contents(self) -> Any:
        return self._value

    def text_nodes(self) -> list:
        """Text nodes held in the contents, including an entity display name."""
        from jsoncrafter.text import TextNode

        if isinstance(self._value, list):
            return list(self._value)
        if isinstance(self._value, TooltipEntity) and isinstance(self._value.name, TextNode):
            return [self._value.name]
        return []

    def _check_payload(self, action: Optional[Enum], value: Any) -> None:
        from jsoncrafter.text import TextNode

        if value is None:
            return
        if isinstance(value, list):
            if not all(isinstance(v, TextNode) for v in value):
                raise InvalidArgumentError("show_text contents must be text nodes")
            expected = HoverAction.SHOW_TEXT
        elif isinstance(value, (TooltipItem, TooltipEntity)):
            expected = value.action
        else:
            raise InvalidArgumentError(f"unsupported hover contents: {value!r}")
        if action is not None and action is not expected:
            raise InvalidArgumentError(f"{action.value} cannot show {expected.value} contents")
