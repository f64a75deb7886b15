"""Shared fixtures for stylesheet and rendering tests."""

from pathlib import Path

import pytest

from termio.registry import Termio

SAMPLE_TCSS = """
// Sample stylesheet
@element "header" {
    color: i-cyan;
    background: black;
    decoration: bold underline;
    padding: 1;
    border: rounded blue;
}

@element "warning" {
    color: yellow;
    decoration: italic;
    margin: 1 2;
}
"""


@pytest.fixture
def sample_tcss() -> str:
    """Stylesheet source with two rules."""
    return SAMPLE_TCSS


@pytest.fixture
def stylesheet_path(tmp_path: Path, sample_tcss: str) -> Path:
    """The sample stylesheet written to disk."""
    path = tmp_path / "styles.tcss"
    path.write_text(sample_tcss, encoding="utf-8")
    return path


@pytest.fixture
def registry(sample_tcss: str) -> Termio:
    """A registry populated from the sample stylesheet."""
    tcss = Termio()
    tcss.parse(sample_tcss)
    return tcss
