"""Shared test fixtures for legal-simplify tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def sample_contract_path() -> Path:
    """Path to the sample contract text file."""
    return Path(__file__).parent.parent / "examples" / "sample_contract.txt"


@pytest.fixture
def sample_contract_text(sample_contract_path: Path) -> str:
    """Full text of the sample contract."""
    return sample_contract_path.read_text(encoding="utf-8")


@pytest.fixture
def short_legal_text() -> str:
    """A short legal text snippet for targeted tests."""
    return (
        "The Provider shall maintain the confidentiality of all proprietary information.\n"
        "The Client shall pay a monthly fee of $5,000. "
        "Late payment incurs a penalty of 1% per month.\n"
        "Either party may terminate this Agreement upon thirty days written notice. "
        "The weather clause is decorative. "
        "The Provider shall indemnify the Client for any breach."
    )


@pytest.fixture
def minimal_text() -> str:
    """Minimal text with no legal content (for edge-case testing)."""
    return "Hello world. This is a simple document with nothing in it."


@pytest.fixture
def tmp_text_file(tmp_path: Path, short_legal_text: str) -> Path:
    """Create a temporary text file with legal content."""
    file = tmp_path / "test_contract.txt"
    file.write_text(short_legal_text, encoding="utf-8")
    return file
