"""Pytest configuration for fsentry tests.

Ensures the project root is in sys.path so imports work correctly.
"""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from tests.fakes.writer import StubWriteContext  # noqa: E402


@pytest.fixture
def stub_context():
    """Write context whose writability is decided per path by the test."""
    return StubWriteContext()
