"""High-level Markdown-to-chat-JSON conversion orchestrator.

Ties together the parser, style manager, and encoder into a single
public API for converting Markdown text or files to chat component JSON.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from jsoncrafter.encoder import Encoder
from jsoncrafter.parser import MarkdownParser
from jsoncrafter.style_manager import StyleManager
from jsoncrafter.text import TextNode

logger = logging.getLogger(__name__)


class Converter:
    """Convert Markdown content to chat component JSON.

    Usage::

        converter = Converter(style_preset="vivid")
        converter.convert_file("motd.md", "motd.json")

        # or from string
        json_text = converter.convert_text("# Hello")
    """

    STYLE_PRESETS = StyleManager.PRESETS

    def __init__(self, style_preset: str = "default", *, indent: Optional[int] = None) -> None:
        self.style_manager = StyleManager(style_preset)
        self.parser = MarkdownParser(self.style_manager)
        self.encoder = Encoder(indent=indent)

    def build(self, markdown_text: str) -> TextNode:
        """Parse Markdown text into a text node tree."""
        return self.parser.parse(markdown_text)

    def convert_json(self, markdown_text: str) -> dict[str, Any]:
        """Convert Markdown text to the encoded JSON object."""
        return self.encoder.encode(self.build(markdown_text))

    def convert_text(self, markdown_text: str) -> str:
        """Convert Markdown text to a JSON string.

        Args:
            markdown_text: Markdown source string.

        Returns:
            The chat component as a JSON string.
        """
        result = self.encoder.dumps(self.convert_json(markdown_text))
        logger.debug("Converted %d chars of Markdown to %d chars of JSON", len(markdown_text), len(result))
        return result

    def convert_plain(self, markdown_text: str) -> str:
        """Convert Markdown text to its unstyled display text."""
        return self.build(markdown_text).to_plain_text()

    def convert_file(
        self,
        input_path: str | Path,
        output_path: str | Path,
        *,
        encoding: str = "utf-8",
    ) -> None:
        """Read a Markdown file and write the JSON output.

        Args:
            input_path: Path to the input ``.md`` file.
            output_path: Path for the output ``.json`` file.
            encoding: Text encoding of the source file.
        """
        input_path = Path(input_path)
        output_path = Path(output_path)

        md_text = input_path.read_text(encoding=encoding)
        json_text = self.convert_text(md_text)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json_text, encoding="utf-8")
        logger.info("Wrote %s", output_path)
