# tests/conftest.py
# This file is part of VClock - Vector Clock Core for Data-Race Detection
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the vector clock core tests.

The configuration handles:
- Python path setup for module imports
- Resetting the shared logger level between tests
- Common clock builders and index fixtures
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from core import VClock, VectorIdx  # noqa: E402
from utils.logger import LogLevel, set_log_level  # noqa: E402


@pytest.fixture(autouse=True)
def quiet_logger():
    """Keep the shared clock logger at WARNING around every test."""
    set_log_level(LogLevel.WARNING)
    yield
    set_log_level(LogLevel.WARNING)


@pytest.fixture
def make_clock():
    """Build a clock from explicit per-slot timestamps.

    Returns:
        Callable[[Sequence[int]], VClock]: Builder trimming trailing zeros
    """
    return VClock.from_timestamps


@pytest.fixture
def thread_indices():
    """Provide vector indices for three threads.

    Returns:
        List[VectorIdx]: Indices 0, 1 and 2
    """
    return [VectorIdx(0), VectorIdx(1), VectorIdx(2)]
