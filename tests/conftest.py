"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from pathlib import Path

import pytest

from ledgeredit.core.datastore import MemoryKeyValueStore


GROCERIES_LEDGER = (
    "2024-01-05 groceries\n"
    "    expenses:food:groceries     $45.00\n"
    "    assets:cash                $-45.00\n"
    "\n"
)

MULTI_TRANSACTION_LEDGER = (
    "2024-01-05 groceries\n"
    "    expenses:food:groceries     $45.00\n"
    "    assets:cash                $-45.00\n"
    "\n"
    "2024-01-06 * lunch with team\n"
    "\texpenses:food:officelunch   $12.50\n"
    "    ; paid by card\n"
    "    liabilities:creditcard:hsbcrevo   $-12.50\n"
    "\n"
    "2024-01-07 salary\n"
    "    assets:bank:dbs:savings   $+3000.00\n"
    "    income:salary             $-3000.00\n"
)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def groceries_ledger() -> str:
    """Single-transaction ledger ending in a blank line."""
    return GROCERIES_LEDGER


@pytest.fixture
def multi_ledger() -> str:
    """Three transactions with tab indentation, a comment line and signed amounts."""
    return MULTI_TRANSACTION_LEDGER


@pytest.fixture
def memory_store() -> MemoryKeyValueStore:
    """Empty in-memory key-value store."""
    return MemoryKeyValueStore()


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables."""
    # Ensure tests don't touch a real ledger
    monkeypatch.setenv("LEDGEREDIT_ENV", "test")
    monkeypatch.setenv("LEDGEREDIT_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("LEDGEREDIT_STORE_FILE", raising=False)
    monkeypatch.delenv("LEDGEREDIT_AMOUNT_COLUMN", raising=False)
    monkeypatch.delenv("LEDGEREDIT_MIN_GAP", raising=False)

    # Every test starts from a fresh configuration
    monkeypatch.setattr("ledgeredit.core.config._config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "parser: Tests for ledger text parsing"
    )
    config.addinivalue_line(
        "markers", "sync: Tests for text/structure synchronization"
    )
    config.addinivalue_line(
        "markers", "cli: Tests for command-line commands"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests running the CLI in a subprocess"
    )
