"""Integration tests for the Converter orchestrator."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from jsoncrafter.converter import Converter
from jsoncrafter.style_manager import StyleManager
from jsoncrafter.text import TextNode

FIXTURE_DIR = Path(__file__).parent / "fixtures"
SAMPLE_MD = FIXTURE_DIR / "sample.md"


class TestConverterInit:
    """Test Converter construction."""

    def test_default_preset(self):
        c = Converter()
        assert c.style_manager.preset == "default"

    def test_custom_preset(self):
        c = Converter(style_preset="vivid")
        assert c.style_manager.preset == "vivid"

    def test_invalid_preset_raises(self):
        with pytest.raises(ValueError):
            Converter(style_preset="nonexistent")

    def test_all_presets_valid(self):
        for preset in StyleManager.PRESETS:
            c = Converter(style_preset=preset)
            assert c.style_manager.preset == preset


class TestConvertText:
    """Test convert_text produces chat component JSON."""

    def test_simple_heading(self):
        text = Converter().convert_text("# Hello World")
        assert json.loads(text) == {
            "text": "",
            "extra": [{
                "text": "",
                "extra": [{"text": "Hello World"}],
                "color": "gold",
                "bold": True,
                "underlined": True,
            }],
        }

    def test_compact_by_default(self):
        text = Converter().convert_text("Some text")
        assert text == '{"text":"","extra":[{"text":"","extra":[{"text":"Some text"}]}]}'

    def test_indent(self):
        text = Converter(indent=2).convert_text("Some text")
        assert text.startswith('{\n  "text": ""')

    def test_non_ascii_preserved(self):
        text = Converter().convert_text("# Überschrift\n\nHéllo wörld.")
        assert "Überschrift" in text
        assert "Héllo wörld." in text

    def test_empty_markdown(self):
        assert Converter().convert_text("") == '{"text":""}'

    def test_all_presets_produce_output(self):
        md = "# Title\n\nBody text."
        for preset in StyleManager.PRESETS:
            data = Converter(style_preset=preset).convert_json(md)
            assert data["extra"], f"Preset {preset} produced empty output"

    def test_presets_differ(self):
        md = "# Title"
        default = Converter("default").convert_json(md)
        vivid = Converter("vivid").convert_json(md)
        assert default["extra"][0]["color"] == "gold"
        assert vivid["extra"][0]["color"] == "#ff5555"


class TestConvertOther:

    def test_build_returns_node(self):
        assert isinstance(Converter().build("hi"), TextNode)

    def test_convert_plain(self):
        plain = Converter().convert_plain("# Title\n\n- a\n- b")
        assert plain == "Title\n• a\n• b"


class TestConvertFile:
    """Test file-based conversion."""

    def test_convert_sample_fixture(self, tmp_path):
        out = tmp_path / "output.json"
        Converter().convert_file(SAMPLE_MD, out)
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["text"] == ""
        assert data["extra"]

    def test_output_directory_created(self, tmp_path):
        md_file = tmp_path / "input.md"
        md_file.write_text("# Test", encoding="utf-8")
        out = tmp_path / "subdir" / "nested" / "output.json"
        Converter().convert_file(md_file, out)
        assert out.exists()

    def test_encoding_parameter(self, tmp_path):
        md_file = tmp_path / "input.md"
        md_file.write_bytes("# Größe".encode("latin-1"))
        out = tmp_path / "output.json"
        Converter().convert_file(md_file, out, encoding="latin-1")
        assert "Größe" in out.read_text(encoding="utf-8")


class TestFullMarkdownFeatures:
    """Test that Markdown features end up in the JSON."""

    @pytest.fixture
    def converter(self):
        return Converter()

    def test_headings(self, converter):
        md = "\n\n".join(f"{'#' * i} Heading {i}" for i in range(1, 7))
        text = converter.convert_text(md)
        for i in range(1, 7):
            assert f"Heading {i}" in text

    def test_bold_italic_strikethrough(self, converter):
        text = converter.convert_text("**bold** *italic* ~~strike~~")
        assert '"bold":true' in text
        assert '"italic":true' in text
        assert '"strikethrough":true' in text

    def test_code_block(self, converter):
        text = converter.convert_text("```python\nprint('hello')\n```")
        assert '"clickEvent":{"action":"copy_to_clipboard","value":"print(\'hello\')"}' in text

    def test_link(self, converter):
        text = converter.convert_text("[GitHub](https://github.com)")
        assert '{"action":"open_url","value":"https://github.com"}' in text

    def test_table(self, converter):
        md = "| Left | Center | Right |\n|:-----|:------:|------:|\n| a | b | c |"
        plain = converter.convert_plain(md)
        assert plain == "Left | Center | Right\na | b | c"
