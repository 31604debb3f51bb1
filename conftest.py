"""
Global pytest configuration for the line breaking tests.

Keeps library logging quiet during the test session so that user-facing
messages do not interleave with pytest output.
"""

import logging

import pytest


@pytest.fixture(scope="session", autouse=True)
def configure_test_logging():
    """Configure minimal library logging for the whole session."""
    from unibreak.logging_config import configure_logging

    configure_logging(level="minimal", console_output=False, collect_performance=False)

    yield

    package_logger = logging.getLogger("unibreak")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)


@pytest.fixture
def fresh_stream():
    """Create a new line break stream."""
    from unibreak.core.streaming import LineBreakStream
    return LineBreakStream()
