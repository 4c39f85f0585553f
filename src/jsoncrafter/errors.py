"""Exceptions raised by the text model and encoder.

Every error is raised at the offending call, before any state is changed.
:class:`UnsupportedContentTypeError` can also surface from
:meth:`jsoncrafter.encoder.Encoder.encode`, because plain content is
stored untyped until it is serialized. So can :class:`CyclicStructureError`
when a hover binding was edited after being attached.
"""

from __future__ import annotations


class JsonCrafterError(Exception):
    """Base class for all jsoncrafter errors."""


class InvalidArgumentError(JsonCrafterError, ValueError):
    """A setter or constructor received a malformed value."""


class UnsupportedActionError(JsonCrafterError, ValueError):
    """An event action is not in the whitelist of its event kind."""

    def __init__(self, kind: str, action: object) -> None:
        super().__init__(f"unsupported action {action!r} for {kind}")
        self.kind = kind
        self.action = action


class CyclicStructureError(JsonCrafterError):
    """A node was about to become its own descendant."""


class UnsupportedContentTypeError(JsonCrafterError, TypeError):
    """A content value has a type the encoder cannot represent in JSON."""

    def __init__(self, value: object) -> None:
        super().__init__(f"unsupported content type: {type(value).__name__}")
        self.value = value
