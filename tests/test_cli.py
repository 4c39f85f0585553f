"""Tests for the CLI module."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from jsoncrafter import __version__
from jsoncrafter.cli import main

FIXTURE_DIR = Path(__file__).parent / "fixtures"
SAMPLE_MD = FIXTURE_DIR / "sample.md"


class TestCLIMain:
    """Test the main() entry point."""

    def test_list_styles(self, capsys):
        ret = main(["--list-styles"])
        assert ret == 0
        out = capsys.readouterr().out
        assert "Available style presets:" in out
        assert "  - default" in out
        assert "  - minimal" in out

    def test_missing_input(self):
        with pytest.raises(SystemExit):
            main([])

    def test_unknown_style(self):
        with pytest.raises(SystemExit):
            main([str(SAMPLE_MD), "-s", "academic"])

    def test_version(self, capsys):
        with pytest.raises(SystemExit):
            main(["--version"])
        assert __version__ in capsys.readouterr().out

    def test_file_not_found(self, capsys):
        ret = main(["nonexistent.md"])
        assert ret == 1
        err = capsys.readouterr().err
        assert "not found" in err

    def test_convert_sample(self, tmp_path, capsys):
        out = tmp_path / "output.json"
        ret = main([str(SAMPLE_MD), "-o", str(out)])
        assert ret == 0
        assert json.loads(out.read_text(encoding="utf-8"))["extra"]
        assert f"Converted: {out}" in capsys.readouterr().out

    def test_verbose_flag(self, tmp_path, capsys):
        out = tmp_path / "output.json"
        ret = main([str(SAMPLE_MD), "-o", str(out), "-v"])
        assert ret == 0
        stdout = capsys.readouterr().out
        assert "Input:" in stdout
        assert "Output:" in stdout
        assert "Style:  default" in stdout
        assert "Done." in stdout

    def test_default_output_name(self, tmp_path, capsys):
        md_file = tmp_path / "myfile.md"
        md_file.write_text("# Test", encoding="utf-8")
        ret = main([str(md_file)])
        assert ret == 0
        assert (tmp_path / "myfile.json").exists()

    def test_stdout_output(self, tmp_path, capsys):
        md_file = tmp_path / "motd.md"
        md_file.write_text("Hello", encoding="utf-8")
        ret = main([str(md_file), "-o", "-"])
        assert ret == 0
        out = capsys.readouterr().out
        assert out.strip() == '{"text":"","extra":[{"text":"","extra":[{"text":"Hello"}]}]}'
        assert not (tmp_path / "motd.json").exists()

    def test_indent(self, tmp_path, capsys):
        md_file = tmp_path / "motd.md"
        md_file.write_text("Hello", encoding="utf-8")
        assert main([str(md_file), "-o", "-", "--indent", "2"]) == 0
        assert '\n  "text": ""' in capsys.readouterr().out

    def test_plain(self, tmp_path, capsys):
        md_file = tmp_path / "motd.md"
        md_file.write_text("# Welcome\n\n**Have** fun", encoding="utf-8")
        assert main([str(md_file), "--plain"]) == 0
        assert capsys.readouterr().out == "Welcome\nHave fun\n"

    def test_bad_encoding_reports_error(self, tmp_path, capsys):
        md_file = tmp_path / "motd.md"
        md_file.write_bytes(b"\xff\xfe\xfa")
        ret = main([str(md_file), "-o", "-"])
        assert ret == 1
        assert capsys.readouterr().err.startswith("Error:")

    def test_style_presets(self, tmp_path, capsys):
        for preset in ["default", "vivid", "muted", "minimal"]:
            out = tmp_path / f"output_{preset}.json"
            ret = main([str(SAMPLE_MD), "-o", str(out), "-s", preset])
            assert ret == 0, f"Failed for preset: {preset}"
            assert out.exists()
