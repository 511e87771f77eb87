"""Shared pytest fixtures."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_report_path():
    """Path to a small report covering the common section layouts."""
    return FIXTURES_DIR / "sample_report.txt"


@pytest.fixture
def sample_report_text(sample_report_path):
    return sample_report_path.read_text(encoding="utf-8")


@pytest.fixture
def section_config():
    """Build a single-section ParserConfig named SECTION."""
    from bluebutton.core.models import ParserConfig

    def _make(**rules):
        return ParserConfig.from_dict({"SECTION": rules})

    return _make


@pytest.fixture
def parse():
    """Parse joined lines with an optional config (empty config by default)."""
    from bluebutton.core.models import ParserConfig
    from bluebutton.core.parser import parse_text

    def _parse(lines, config=None):
        if config is None:
            config = ParserConfig()
        return parse_text("\n".join(lines) + "\n", config)

    return _parse
