"""
Pytest configuration and shared fixtures for the test suite.

This module provides common test fixtures, configuration, and helpers
used across all test modules.
"""

from typing import Dict

import pytest

from unibreak.utils.validation import TokenValidator


@pytest.fixture
def validator() -> TokenValidator:
    """Provide a strict token validator instance."""
    return TokenValidator(strict_mode=True)


@pytest.fixture
def sample_texts() -> Dict[str, str]:
    """Provide sample text data for testing."""
    return {
        "simple": "This is a simple test text.",
        "medium": "This is a medium test text. It has multiple sentences.\nEach line provides test content.\n",
        "long": "This is a long test text. " * 50,
        "unicode": "Unicode test: héllo wörld! 你好世界 🌍",
        "whitespace": "   \n\t   ",
        "single_char": "A",
        "numbers": "123 456 789 (10.5%) $12",
        "punctuation": "Hello, world! How are you? \"I'm fine.\" Thanks!",
        "windows_lines": "first line\r\nsecond line\r\n",
        "combining": "café näive",
        "hangul": "한국어 텍스트",
        "glue": "100 km and word⁠joiner",
    }


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "slow: mark test as slow running")


def pytest_collection_modifyitems(config, items):
    """Add the unit marker to tests that carry no other category marker."""
    for item in items:
        if not any(marker.name in ["integration", "slow"] for marker in item.iter_markers()):
            item.add_marker(pytest.mark.unit)
