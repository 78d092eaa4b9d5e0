"""Shared fixtures for navsdk parser tests."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from navsdk.parsers import SentenceRegistry, checksum


def _frame(body: str, sigil: str = '$') -> str:
    """Wrap a sentence body with sigil and its correct checksum."""
    return f"{sigil}{body}*{checksum(body):02X}"


@pytest.fixture
def frame():
    """Builds well-formed sentences: frame('GPHDT,1,T') -> '$GPHDT,1,T*2A'"""
    return _frame


@pytest.fixture
def registry():
    """Fresh registry with the built-in sentences"""
    return SentenceRegistry()
