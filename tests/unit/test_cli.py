"""Tests for the tokenforge CLI."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from tokenforge.cli import app
from tokenforge.core.manifest import MANIFEST_FILE
from tokenforge.core.scales import SHADE_KEYS, generate_color_scale

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every command from an empty directory with no manifest."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "tokenforge" in result.output
        assert "Python" in result.output


class TestGenerateCommand:
    def test_writes_all_formats_to_default_dir(self, isolated_cwd):
        result = runner.invoke(app, ["generate"])
        assert result.exit_code == 0, result.output
        out = isolated_cwd / "tokens"
        for name in ("design-tokens.css", "tailwind.config.ts", "figma-variables.json", "theme.ts"):
            assert (out / name).is_file()

    def test_output_and_format_options(self, isolated_cwd):
        result = runner.invoke(app, ["generate", "-f", "css", "-f", "typescript", "-o", "dist"])
        assert result.exit_code == 0, result.output
        assert sorted(p.name for p in (isolated_cwd / "dist").iterdir()) == [
            "design-tokens.css",
            "theme.ts",
        ]

    def test_stdout_single_format(self):
        result = runner.invoke(app, ["generate", "--primary", "#ff0000", "-f", "css", "--stdout"])
        assert result.exit_code == 0, result.output
        assert "--color-primary-500: #ff0000;" in result.output

    def test_stdout_requires_one_format(self):
        result = runner.invoke(app, ["generate", "--stdout"])
        assert result.exit_code == 1

    def test_unknown_format(self, isolated_cwd):
        result = runner.invoke(app, ["generate", "-f", "scss"])
        assert result.exit_code == 1
        assert not (isolated_cwd / "tokens").exists()

    def test_uses_manifest(self, isolated_cwd):
        (isolated_cwd / MANIFEST_FILE).write_text(
            '[seeds]\nprimary = "#ff0000"\n\n[export]\noutput_dir = "out"\nformats = ["css"]\n',
            encoding="utf-8",
        )
        result = runner.invoke(app, ["generate"])
        assert result.exit_code == 0, result.output
        css = (isolated_cwd / "out" / "design-tokens.css").read_text(encoding="utf-8")
        assert "--color-primary-500: #ff0000;" in css
        assert not (isolated_cwd / "out" / "theme.ts").exists()

    def test_command_line_seed_overrides_manifest(self, isolated_cwd):
        (isolated_cwd / MANIFEST_FILE).write_text(
            '[seeds]\nprimary = "#ff0000"\n', encoding="utf-8"
        )
        result = runner.invoke(
            app, ["generate", "--primary", "#00ff00", "-f", "typescript", "--stdout"]
        )
        assert result.exit_code == 0, result.output
        assert generate_color_scale("#00ff00")["500"] in result.output

    def test_explicit_manifest_path(self, isolated_cwd):
        config_dir = isolated_cwd / "config"
        config_dir.mkdir()
        manifest = config_dir / MANIFEST_FILE
        manifest.write_text('[export]\nformats = ["tailwind"]\n', encoding="utf-8")
        result = runner.invoke(app, ["generate", "--manifest", str(manifest)])
        assert result.exit_code == 0, result.output
        assert (config_dir / "tokens" / "tailwind.config.ts").is_file()

    def test_markup_like_output_dir(self, isolated_cwd):
        result = runner.invoke(app, ["generate", "-f", "css", "-o", "out[/b]"])
        assert result.exception is None, result.exception
        assert (isolated_cwd / "out[" / "b]" / "design-tokens.css").is_file()

    def test_markup_like_format_name_reports_error(self):
        result = runner.invoke(app, ["generate", "-f", "[/css]"])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)

    def test_invalid_manifest(self, isolated_cwd):
        (isolated_cwd / MANIFEST_FILE).write_text("[seeds\n", encoding="utf-8")
        result = runner.invoke(app, ["generate"])
        assert result.exit_code == 1


class TestScaleCommand:
    def test_json(self):
        result = runner.invoke(app, ["scale", "#ff0000", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert tuple(data) == SHADE_KEYS
        assert data["500"] == "#ff0000"

    def test_dark_json(self):
        result = runner.invoke(app, ["scale", "#2563eb", "--dark", "--json"])
        assert result.exit_code == 0, result.output
        light = generate_color_scale("#2563eb")
        assert json.loads(result.output)["50"] == light["950"]

    def test_table(self):
        result = runner.invoke(app, ["scale", "#2563eb"])
        assert result.exit_code == 0, result.output
        assert "950" in result.output

    @pytest.mark.parametrize("seed", ["[/oops]", "[bold", "#25[red]"])
    def test_markup_like_seed_renders_gray_scale(self, seed):
        result = runner.invoke(app, ["scale", seed])
        assert result.exception is None, result.exception
        assert result.exit_code == 0
        assert "#808080" in result.output


class TestContrastCommand:
    def test_json(self):
        result = runner.invoke(app, ["contrast", "#000000", "#ffffff", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["ratio"] == 21.0
        assert data["aa"] is True
        assert data["aaaLarge"] is True
        assert data["level"] == "AAA"

    def test_text(self):
        result = runner.invoke(app, ["contrast", "#949494", "#ffffff"])
        assert result.exit_code == 0, result.output
        assert "AA Large" in result.output


class TestAuditCommand:
    def test_default_tokens_flag_muted_text(self):
        # Light muted text on the muted surface only meets the large-text bar
        result = runner.invoke(app, ["audit"])
        assert result.exit_code == 1
        assert "muted" in result.output

    def test_manifest_error(self, isolated_cwd):
        (isolated_cwd / MANIFEST_FILE).write_text('[export]\nformats = ["x"]\n', encoding="utf-8")
        result = runner.invoke(app, ["audit"])
        assert result.exit_code == 1
        assert "muted" not in result.output
