"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

from moneymap.main import app


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "parity: textbook benchmark checks")


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)
