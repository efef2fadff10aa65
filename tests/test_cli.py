"""Tests for the command line entry point."""

import json
import logging

import pytest

from hsl_theme_generator.cli import TRACE_LOGGER, main
from hsl_theme_generator.errors import ColorRangeError, MissingFieldError
from hsl_theme_generator.vscode import build_theme


class TestUsage:
    def test_no_arguments(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 1
        assert "usage:" in capsys.readouterr().err

    def test_one_argument(self, tmp_path, config_file, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(config_file)])
        assert exc_info.value.code == 1
        assert "error" in capsys.readouterr().err
        assert list(tmp_path.iterdir()) == [config_file]


class TestMain:
    def test_writes_theme(self, tmp_path, config_file, config_data, capsys):
        output = tmp_path / "theme.json"
        main([str(config_file), str(output)])

        theme = json.loads(output.read_text(encoding="utf-8"))
        assert theme == build_theme(config_data)
        assert output.read_text(encoding="utf-8").startswith('{\n  "type"')

        out = capsys.readouterr().out
        assert f"Loading config: {config_file}" in out
        assert str(output) in out

    def test_overwrites_existing(self, tmp_path, config_file):
        output = tmp_path / "theme.json"
        output.write_text("old content that is much longer than needed " * 100)
        main([str(config_file), str(output)])
        assert json.loads(output.read_text(encoding="utf-8"))["type"] == "#000000"

    def test_missing_field_writes_nothing(self, tmp_path, config_data):
        del config_data["language"]["comment"]
        config_file = tmp_path / "palette.json"
        config_file.write_text(json.dumps(config_data), encoding="utf-8")
        output = tmp_path / "theme.json"

        with pytest.raises(MissingFieldError, match="language.comment"):
            main([str(config_file), str(output)])
        assert not output.exists()

    def test_invalid_json(self, tmp_path):
        config_file = tmp_path / "palette.json"
        config_file.write_text("[oops", encoding="utf-8")
        output = tmp_path / "theme.json"

        with pytest.raises(json.JSONDecodeError):
            main([str(config_file), str(output)])
        assert not output.exists()

    def test_nan_in_config_writes_nothing(self, tmp_path, config_data):
        text = json.dumps(config_data).replace('"comment": [0, 100, 50]', '"comment": [NaN, 100, 50]')
        config_file = tmp_path / "palette.json"
        config_file.write_text(text, encoding="utf-8")
        output = tmp_path / "theme.json"

        with pytest.raises(ValueError, match="NaN"):
            main([str(config_file), str(output)])
        assert not output.exists()

    def test_extra_paths_ignored(self, tmp_path, config_file, config_data):
        output = tmp_path / "theme.json"
        extra = tmp_path / "extra.json"
        main([str(config_file), str(output), str(extra)])
        assert json.loads(output.read_text(encoding="utf-8")) == build_theme(config_data)
        assert not extra.exists()

    def test_unwritable_output(self, tmp_path, config_file):
        with pytest.raises(OSError):
            main([str(config_file), str(tmp_path / "missing" / "theme.json")])

    def test_strict(self, tmp_path, config_data):
        config_data["themeType"] = [0, 0, 120]
        config_file = tmp_path / "palette.json"
        config_file.write_text(json.dumps(config_data), encoding="utf-8")
        output = tmp_path / "theme.json"

        # Permissive by default
        main([str(config_file), str(output)])
        assert output.exists()
        output.unlink()

        with pytest.raises(ColorRangeError, match="themeType"):
            main(["--strict", str(config_file), str(output)])
        assert not output.exists()

    def test_verbose_traces_conversions(self, tmp_path, config_file, caplog):
        caplog.set_level(logging.DEBUG)
        main(["-v", str(config_file), str(tmp_path / "theme.json")])
        trace = [r for r in caplog.records if r.name == TRACE_LOGGER]
        assert trace
        assert "hsl(0, 100, 50) -> #ff0000" in [r.getMessage() for r in trace]
