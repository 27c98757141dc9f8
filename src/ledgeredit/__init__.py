"""
ledgeredit - Plaintext Ledger Account Editor

Loads a plaintext double-entry ledger and lets the account of each posting be
changed through a structured view, while the raw text and the structured view
stay in sync.

Key Features:
- Line-oriented parser for a dollar-amount subset of the ledger format
- Account edits that rewrite exactly one line and preserve everything else
- Searchable account picker for interactive review
- Local JSON store for the ledger text, account list and preferences

Domain Packages:
- core: Models, parser, sync engine, document, storage, configuration
- cli: Command-line interface (ledgeredit)

Example Usage:
    from ledgeredit import parse_ledger, apply_account_edit

    transactions = parse_ledger(text)
    text, transactions = apply_account_edit(text, transactions, 0, 0, "assets:cash")
"""

__version__ = "0.1.0"
__author__ = "Karl Davis"

from .core.config import Environment, get_config
from .core.document import LedgerDocument
from .core.models import Posting, Transaction
from .core.parser import parse_ledger
from .core.sync import apply_account_edit

__all__ = [
    # Configuration
    "Environment",
    "get_config",
    # Models
    "LedgerDocument",
    "Posting",
    "Transaction",
    # Parse/edit
    "apply_account_edit",
    "parse_ledger",
]
