"""Markdown front-end that builds text node trees.

Uses mistune v3 to parse Markdown and converts the token stream into a
:class:`~jsoncrafter.text.TextNode` tree styled by a
:class:`~jsoncrafter.style_manager.StyleManager` preset. Each block
becomes one child of an empty root node, separated by newline runs.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Optional

import mistune

from jsoncrafter.errors import InvalidArgumentError
from jsoncrafter.events import ClickEvent, HoverEvent
from jsoncrafter.style_manager import StyleDef, StyleManager
from jsoncrafter.text import PlainText, TextNode

logger = logging.getLogger(__name__)


def _join(nodes: list[TextNode], separator: str = "\n") -> TextNode:
    """Wrap *nodes* in an empty node, with *separator* runs between them."""
    container = PlainText("")
    for idx, node in enumerate(nodes):
        if idx and separator:
            container.add_children(PlainText(separator))
        container.add_children(node)
    return container


def _styled(role: StyleDef, children: Sequence[TextNode] = (), content: str = "") -> TextNode:
    """Build a node for *role*: prefix, content, children, then suffix."""
    node = PlainText(role.prefix + content).apply_style(role.style)
    node.add_children(*children)
    if role.suffix:
        node.add_children(PlainText(role.suffix))
    return node


class MarkdownParser:
    """Parse Markdown text into a :class:`TextNode` tree."""

    def __init__(self, style_manager: Optional[StyleManager] = None) -> None:
        self.styles = style_manager or StyleManager()
        self._md = mistune.create_markdown(
            renderer=None,  # AST mode
            plugins=["table", "strikethrough", "footnotes", "task_lists"],
        )
        self._footnotes: dict[str, list[dict[str, Any]]] = {}

    # -- public API ---------------------------------------------------------

    def parse(self, markdown_text: str) -> TextNode:
        """Return the root ``TextNode`` for *markdown_text*."""
        tokens: list[dict[str, Any]] = self._md(markdown_text)  # type: ignore[assignment]
        self._footnotes = self._collect_footnotes(tokens)
        blocks = self._convert_tokens(tokens)
        logger.debug("Parsed %d top-level blocks", len(blocks))
        return _join(blocks)

    # -- token conversion ---------------------------------------------------

    def _convert_tokens(self, tokens: list[dict[str, Any]]) -> list[TextNode]:
        nodes: list[TextNode] = []
        for tok in tokens:
            node = self._convert_token(tok)
            if node is not None:
                nodes.append(node)
        return nodes

    def _convert_token(self, tok: dict[str, Any]) -> Optional[TextNode]:
        ttype = tok.get("type", "")
        handler = getattr(self, f"_handle_{ttype}", None)
        if handler:
            return handler(tok)
        # Fallback - treat unknown tokens as plain text if they carry text.
        raw = tok.get("raw", tok.get("text", ""))
        if raw:
            logger.debug("No handler for %r token, keeping raw text", ttype)
            return PlainText(str(raw))
        return None

    def _convert_inline(self, children: Any) -> list[TextNode]:
        if children is None:
            return []
        if isinstance(children, str):
            return [PlainText(children)]
        if isinstance(children, list):
            return self._convert_tokens(children)
        return []

    def _convert_blocks(self, children: Any) -> list[TextNode]:
        if isinstance(children, list):
            return self._convert_tokens(children)
        return self._convert_inline(children)

    # -- block handlers -----------------------------------------------------

    def _handle_heading(self, tok: dict) -> TextNode:
        level = tok.get("attrs", {}).get("level", tok.get("level", 1))
        children_raw = tok.get("children") or tok.get("text", "")
        return _styled(self.styles.get_heading_style(level), self._convert_inline(children_raw))

    def _handle_paragraph(self, tok: dict) -> TextNode:
        children_raw = tok.get("children") or tok.get("text", "")
        return _styled(self.styles.get_body_style(), self._convert_inline(children_raw))

    def _handle_block_text(self, tok: dict) -> TextNode:
        """Block text inside list items."""
        return self._handle_paragraph(tok)

    def _handle_thematic_break(self, _tok: dict) -> TextNode:
        return _styled(self.styles.get_style("horizontal_rule"))

    def _handle_block_code(self, tok: dict) -> TextNode:
        """Fenced / indented code block. Clicking copies the code."""
        attrs = tok.get("attrs", {})
        raw = tok.get("raw", tok.get("text", ""))
        code = (raw if isinstance(raw, str) else str(raw)).rstrip("\n")
        node = _styled(self.styles.get_code_style(), content=code)
        node.set_event(ClickEvent.copy_to_clipboard(code))
        language = attrs.get("info", tok.get("info", "")) or ""
        if language:
            node.set_event(HoverEvent().show(language))
        return node

    def _handle_block_quote(self, tok: dict) -> TextNode:
        role = self.styles.get_style("blockquote")
        lines = [
            _styled(role, [block])
            for block in self._convert_blocks(tok.get("children", []))
        ]
        return _join(lines)

    def _handle_blockquote(self, tok: dict) -> TextNode:
        return self._handle_block_quote(tok)

    def _handle_block_html(self, tok: dict) -> TextNode:
        return PlainText(str(tok.get("raw", "")).rstrip("\n"))

    # -- inline handlers ----------------------------------------------------

    def _handle_text(self, tok: dict) -> TextNode:
        raw = tok.get("raw", tok.get("text", tok.get("children", "")))
        if isinstance(raw, str):
            return PlainText(raw)
        return _join(self._convert_inline(raw), separator="")

    def _handle_strong(self, tok: dict) -> TextNode:
        children_raw = tok.get("children") or tok.get("text", "")
        return PlainText("").set_bold(True).add_children(*self._convert_inline(children_raw))

    def _handle_emphasis(self, tok: dict) -> TextNode:
        children_raw = tok.get("children") or tok.get("text", "")
        return PlainText("").set_italic(True).add_children(*self._convert_inline(children_raw))

    def _handle_strikethrough(self, tok: dict) -> TextNode:
        children_raw = tok.get("children") or tok.get("text", "")
        return PlainText("").set_strikethrough(True).add_children(*self._convert_inline(children_raw))

    def _handle_codespan(self, tok: dict) -> TextNode:
        raw = tok.get("raw", tok.get("text", tok.get("children", "")))
        return _styled(self.styles.get_inline_code_style(), content=str(raw))

    def _handle_inline_html(self, tok: dict) -> TextNode:
        return PlainText(str(tok.get("raw", "")))

    def _handle_linebreak(self, _tok: dict) -> TextNode:
        return PlainText("\n")

    def _handle_softbreak(self, _tok: dict) -> TextNode:
        return PlainText(" ")

    def _handle_blank_line(self, _tok: dict) -> Optional[TextNode]:
        return None

    # -- link / image -------------------------------------------------------

    def _handle_link(self, tok: dict) -> TextNode:
        attrs = tok.get("attrs", {})
        url = attrs.get("url", tok.get("link", ""))
        title = attrs.get("title", "") or ""
        children_raw = tok.get("children") or tok.get("text", "")
        node = _styled(self.styles.get_link_style(), self._convert_inline(children_raw))
        self._bind_url(node, url)
        if title or url:
            node.set_event(HoverEvent().show(title or url))
        return node

    def _handle_image(self, tok: dict) -> TextNode:
        attrs = tok.get("attrs", {})
        alt = attrs.get("alt", tok.get("alt", ""))
        children_raw = tok.get("children")
        if not alt and children_raw:
            alt = self._extract_text(children_raw)
        url = attrs.get("url", tok.get("src", ""))
        node = _styled(self.styles.get_style("image"), content=alt or url)
        self._bind_url(node, url)
        return node

    def _bind_url(self, node: TextNode, url: str) -> None:
        try:
            node.set_event(ClickEvent.open_url(url))
        except InvalidArgumentError:
            logger.debug("Not a clickable URL: %r", url)

    # -- lists --------------------------------------------------------------

    def _handle_list(self, tok: dict) -> TextNode:
        attrs = tok.get("attrs", {})
        ordered = attrs.get("ordered", False)
        start = attrs.get("start", 1) or 1
        depth = attrs.get("depth", 0) or 0
        indent = "  " * depth
        items: list[TextNode] = []
        for idx, item_tok in enumerate(tok.get("children", [])):
            if item_tok.get("type") not in ("list_item", "task_list_item"):
                continue
            role = self._item_role(item_tok, ordered)
            prefix = indent + role.prefix.format(n=start + idx)
            items.append(self._make_item(item_tok, role.derive(prefix=prefix)))
        return _join(items)

    def _item_role(self, tok: dict, ordered: bool) -> StyleDef:
        attrs = tok.get("attrs", {})
        if tok.get("type") == "task_list_item" or "checked" in attrs:
            return self.styles.get_style("task_done" if attrs.get("checked") else "task_open")
        return self.styles.get_style("ordered_item" if ordered else "list_item")

    def _make_item(self, tok: dict, role: StyleDef) -> TextNode:
        blocks = self._convert_blocks(tok.get("children", []))
        return _styled(role, [_join(blocks)])

    # -- table --------------------------------------------------------------

    def _handle_table(self, tok: dict) -> TextNode:
        rows: list[TextNode] = []
        for child in tok.get("children", []):
            ctype = child.get("type", "")
            if ctype in ("table_head", "thead"):
                rows.extend(self._handle_table_section(child, is_header=True))
            elif ctype in ("table_body", "tbody"):
                rows.extend(self._handle_table_section(child, is_header=False))
            elif ctype in ("table_row", "tr"):
                rows.append(self._make_table_row(child.get("children", []), is_header=False))
        return _join(rows)

    def _handle_table_section(self, tok: dict, *, is_header: bool) -> list[TextNode]:
        children = tok.get("children", [])
        if not children:
            return []

        # table_head has table_cell children directly (one implicit row)
        # table_body has table_row children, each with table_cell children
        if children[0].get("type", "") == "table_cell":
            return [self._make_table_row(children, is_header=is_header)]
        return [
            self._make_table_row(child.get("children", []), is_header=is_header)
            for child in children
        ]

    def _make_table_row(self, cell_tokens: list[dict], *, is_header: bool) -> TextNode:
        cells: list[TextNode] = []
        for cell_tok in cell_tokens:
            cell_is_header = cell_tok.get("attrs", {}).get("head", is_header)
            role = self.styles.get_style("table_header" if cell_is_header else "table_body")
            cells.append(_styled(role, self._convert_inline(cell_tok.get("children", []))))
        return _join(cells, separator=" | ")

    # -- footnotes ----------------------------------------------------------

    def _collect_footnotes(self, tokens: list[dict[str, Any]]) -> dict[str, list[dict[str, Any]]]:
        notes: dict[str, list[dict[str, Any]]] = {}
        for tok in tokens:
            if tok.get("type") != "footnotes":
                continue
            for item in tok.get("children", []):
                if item.get("type") == "footnote_item":
                    notes[self._footnote_key(item)] = item.get("children", [])
        return notes

    @staticmethod
    def _footnote_key(tok: dict) -> str:
        attrs = tok.get("attrs", {})
        return str(attrs.get("key", attrs.get("index", "")))

    def _handle_footnote_ref(self, tok: dict) -> TextNode:
        attrs = tok.get("attrs", {})
        key = str(tok.get("raw", "") or attrs.get("key", attrs.get("index", "")))
        node = _styled(self.styles.get_style("footnote_ref"), content=key)
        definition = self._footnotes.get(key)
        if definition:
            node.set_event(HoverEvent().show(*self._convert_blocks(definition)))
        return node

    def _handle_footnotes(self, tok: dict) -> Optional[TextNode]:
        """Footnote definitions, listed after the body."""
        defs = [
            self._handle_footnote_item(child)
            for child in tok.get("children", [])
            if child.get("type") == "footnote_item"
        ]
        return _join(defs) if defs else None

    def _handle_footnote_item(self, tok: dict) -> TextNode:
        key = self._footnote_key(tok)
        role = self.styles.get_style("footnote").derive(prefix=f"[{key}] ")
        return _styled(role, self._convert_blocks(tok.get("children", [])))

    # -- helpers ------------------------------------------------------------

    def _extract_text(self, children: Any) -> str:
        if isinstance(children, str):
            return children
        if isinstance(children, list):
            parts: list[str] = []
            for c in children:
                if isinstance(c, dict):
                    parts.append(c.get("raw", c.get("text", "")))
                elif isinstance(c, str):
                    parts.append(c)
            return "".join(parts)
        return ""
