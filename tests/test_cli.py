"""
Tests for the bluebutton command-line interface.
"""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def no_config_file(tmp_path, monkeypatch):
    """Run every CLI test from an empty directory with no config file."""
    from bluebutton.config import loader

    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(loader, "CONFIG_FILENAME", ".bluebutton-test-absent.toml")


class TestParseCommand:
    """Tests for `bluebutton parse`."""

    def test_parse_to_stdout(self, sample_report_path, capsys):
        from bluebutton.cli import main

        assert main(["parse", str(sample_report_path)]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["DEMOGRAPHICS"]["Blood Type"] == "AB+"
        assert data["VA WELLNESS REMINDERS"]["Reminders"][1]["Due Date"] is None

    def test_parse_to_file(self, sample_report_path, tmp_path):
        from bluebutton.cli import main

        output = tmp_path / "out" / "report.json"
        assert main(["-q", "parse", str(sample_report_path), "-o", str(output)]) == 0

        data = json.loads(output.read_text(encoding="utf-8"))
        assert "IMMUNIZATIONS" in data

    def test_parse_selected_sections(self, sample_report_path, capsys):
        from bluebutton.cli import main

        code = main(
            [
                "parse",
                str(sample_report_path),
                "--section",
                "VA APPOINTMENTS",
                "--section",
                "NOT IN REPORT",
            ]
        )

        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert list(data) == ["VA APPOINTMENTS"]

    def test_parse_stdin(self, monkeypatch, capsys):
        import io

        from bluebutton.cli import main

        monkeypatch.setattr(sys, "stdin", io.StringIO("---- SECTION ----\r\nKey: value\r\n"))

        assert main(["parse", "-", "--newline", "\\r\\n", "--indent", "0"]) == 0
        assert json.loads(capsys.readouterr().out) == {"SECTION": {"Key": "value"}}

    def test_parse_missing_file(self, tmp_path, capsys):
        from bluebutton.cli import main

        assert main(["parse", str(tmp_path / "missing.txt")]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_parse_with_config_file(self, tmp_path, capsys):
        from bluebutton.cli import main

        config_file = tmp_path / "custom.toml"
        config_file.write_text(
            '[options]\nuse_defaults = false\n\n[sections."SECTION"]\nskip_lines = ["^Hidden"]\n'
        )
        report = tmp_path / "report.txt"
        report.write_text("---- SECTION ----\nHidden: 1\nShown: 2\n")

        assert main(["--config", str(config_file), "parse", str(report)]) == 0
        assert json.loads(capsys.readouterr().out) == {"SECTION": {"Shown": "2"}}


class TestSectionsCommand:
    """Tests for `bluebutton sections`."""

    def test_lists_default_sections(self, capsys):
        from bluebutton.cli import main

        assert main(["sections"]) == 0

        out = capsys.readouterr().out
        assert "DEMOGRAPHICS\n" in out
        assert "  EMERGENCY CONTACTS: items starting with 'Contact First Name:'" in out
        assert "  Reminders: table of 4 columns" in out

    def test_no_defaults(self, capsys):
        from bluebutton.cli import main

        assert main(["--no-defaults", "sections"]) == 0
        assert capsys.readouterr().out == ""


class TestConfigCommand:
    """Tests for `bluebutton config`."""

    def test_path_without_config(self, capsys):
        from bluebutton.cli import main

        assert main(["config", "path"]) == 1
        assert "No .bluebutton.toml found" in capsys.readouterr().err

    def test_path_with_explicit_config(self, tmp_path, capsys):
        from bluebutton.cli import main

        config_file = tmp_path / "custom.toml"
        config_file.write_text("")

        assert main(["--config", str(config_file), "config", "path"]) == 0
        assert capsys.readouterr().out.strip() == str(config_file)

    def test_show(self, capsys):
        from bluebutton.cli import main

        assert main(["config", "show"]) == 0

        out = capsys.readouterr().out
        assert "[options]" in out
        assert "DOD MILITARY SERVICE INFORMATION" in out
        assert "table_starts_with" in out


class TestMain:
    """Tests for top-level CLI behavior."""

    def test_no_command_prints_help(self, capsys):
        from bluebutton.cli import main

        assert main([]) == 0
        assert "bluebutton" in capsys.readouterr().out

    def test_version(self, capsys):
        from bluebutton.cli import main

        with pytest.raises(SystemExit) as exc:
            main(["--version"])

        assert exc.value.code == 0
        assert "bluebutton" in capsys.readouterr().out

    def test_module_entry_point(self):
        src_dir = Path(__file__).resolve().parent.parent / "src"
        env = {**os.environ, "PYTHONPATH": str(src_dir)}
        result = subprocess.run(
            [sys.executable, "-m", "bluebutton", "--help"],
            capture_output=True,
            text=True,
            timeout=60,
            env=env,
        )
        assert result.returncode == 0
        assert "parse" in result.stdout
