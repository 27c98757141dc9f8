"""
Core Package

Ledger parsing, text/structure synchronization, persistence and configuration
shared by the command-line interface.

This package provides:
- Structured ledger models (transactions and postings)
- The line-oriented parser and the account-edit sync engine
- The owned ledger document, loaded from and flushed to a key-value store
- Environment-based configuration and logging setup
"""

from .config import (
    Config,
    EditorConfig,
    Environment,
    get_config,
    get_data_dir,
    get_store_file,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .datastore import (
    ACCOUNT_OPTIONS_KEY,
    FIXED_ACCOUNT_KEY,
    HIGHLIGHTED_ACCOUNT_KEY,
    LEDGER_TEXT_KEY,
    JsonKeyValueStore,
    KeyValueStore,
    MemoryKeyValueStore,
)
from .document import LedgerDocument
from .models import Posting, Transaction
from .options import DEFAULT_ACCOUNT_OPTIONS, filter_account_options, parse_account_options
from .parser import iter_postings, parse_ledger
from .sync import apply_account_edit, format_posting_line, rewrite_posting_line

__all__ = [
    "ACCOUNT_OPTIONS_KEY",
    "DEFAULT_ACCOUNT_OPTIONS",
    "FIXED_ACCOUNT_KEY",
    "HIGHLIGHTED_ACCOUNT_KEY",
    "LEDGER_TEXT_KEY",
    # Configuration
    "Config",
    "EditorConfig",
    "Environment",
    # Persistence
    "JsonKeyValueStore",
    "KeyValueStore",
    "LedgerDocument",
    "MemoryKeyValueStore",
    # Data models
    "Posting",
    "Transaction",
    # Parsing and editing
    "apply_account_edit",
    "filter_account_options",
    "format_posting_line",
    "get_config",
    "get_data_dir",
    "get_store_file",
    "is_development",
    "is_production",
    "is_test",
    "iter_postings",
    "parse_account_options",
    "parse_ledger",
    "reload_config",
    "rewrite_posting_line",
]
