"""Shared pytest fixtures for recitation verification tests."""
import pytest

from recitation.alignment.tokenizer import split_expected
from recitation.rules import SAMPLE_TEXT
from recitation.session.practice_session import PracticeSession


@pytest.fixture
def sample_words():
    """Bismillah split into its four expected words (with diacritics)."""
    return split_expected(SAMPLE_TEXT)


@pytest.fixture
def session():
    """Return a fresh PracticeSession."""
    return PracticeSession()
