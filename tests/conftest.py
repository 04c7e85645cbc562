"""Shared test fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def tmp_book(tmp_path: Path) -> Path:
    """Create a temporary mdBook source directory with sample documents."""
    src = tmp_path / "book" / "src"
    src.mkdir(parents=True)

    (src / "README.md").write_text("# Introduction\n\nWelcome to the book.")
    (src / "intro.md").write_text("# Getting Started\n\nFirst steps.")
    (src / "draft").write_text("no extension, not a document")

    # Indexed subdirectory
    guide = src / "guide"
    guide.mkdir()
    (guide / "README.md").write_text("# Guide\n")
    (guide / "setup.md").write_text("Some text first\n# Setup #\n## Details")

    # Subdirectory without an index
    scratch = src / "scratch"
    scratch.mkdir()
    (scratch / "notes.md").write_text("# Notes")

    return src


@pytest.fixture
def expected_summary() -> str:
    """SUMMARY.md rendered for tmp_book without titles."""
    return "\n".join(
        [
            "# Summary",
            "",
            "* [Welcome](README.md)",
            "* [intro](intro.md)",
            "",
            "----",
            "* [guide](guide/README.md)",
            "    * [setup](guide/setup.md)",
        ]
    )
