"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
from typing import List

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

REGION_CODES = ["alpha", "bravo", "charlie", "delta", "echo", "foxtrot", "golf", "hotel", "india", "juliet"]
LOW_SCORING = [
    "Kittens nap quietly beside warm fireplaces.",
    "Bicycles rattle along cobbled village lanes.",
]


@pytest.fixture
def high_sentences() -> List[str]:
    """Ten sentences sharing six frequent words; each scores 61."""
    return [f"Solar energy powers modern grids in region {code}." for code in REGION_CODES]


@pytest.fixture
def low_sentences() -> List[str]:
    """Two sentences made of words seen once; each scores 6."""
    return list(LOW_SCORING)


@pytest.fixture
def twelve_sentence_text(high_sentences, low_sentences) -> str:
    ordered = [low_sentences[0]] + high_sentences[:5] + [low_sentences[1]] + high_sentences[5:]
    return " ".join(ordered)


@pytest.fixture
def long_text(twelve_sentence_text) -> str:
    """Long enough to fill every remote chunk."""
    return " ".join([twelve_sentence_text] * 3)
