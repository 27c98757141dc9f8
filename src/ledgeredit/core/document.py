#!/usr/bin/env python3
"""
Ledger Document

Owns the raw ledger text and its parsed transactions as a single unit. Every
change goes through this object: the text is updated, the transactions are
re-derived by a full parse, and the new text is flushed to the store.

Transactions handed out by this object are snapshots. Their line indexes are
only meaningful until the next change; callers address postings by
(transaction_index, posting_index) and let the document resolve them.
"""

import logging

from .config import DEFAULT_AMOUNT_COLUMN, DEFAULT_FALLBACK_INDENT, DEFAULT_MIN_GAP, Config
from .datastore import (
    ACCOUNT_OPTIONS_KEY,
    FIXED_ACCOUNT_KEY,
    HIGHLIGHTED_ACCOUNT_KEY,
    LEDGER_TEXT_KEY,
    JsonKeyValueStore,
    KeyValueStore,
)
from .models import Posting, Transaction
from .options import DEFAULT_ACCOUNT_OPTIONS, parse_account_options
from .parser import parse_ledger
from .sync import apply_account_edit

logger = logging.getLogger(__name__)


class LedgerDocument:
    """Raw ledger text plus the structured view derived from it."""

    def __init__(
        self,
        text: str = "",
        store: KeyValueStore | None = None,
        amount_column: int = DEFAULT_AMOUNT_COLUMN,
        min_gap: int = DEFAULT_MIN_GAP,
        fallback_indent: str = DEFAULT_FALLBACK_INDENT,
    ):
        """
        Initialize a document.

        Args:
            text: Initial raw ledger text (not flushed to the store)
            store: Where the text and preferences are persisted; None keeps
                everything in memory
            amount_column: Target amount column used when rewriting postings
            min_gap: Minimum spaces between a long account name and its amount
            fallback_indent: Indent for rewritten lines that had none
        """
        self.store = store
        self.amount_column = amount_column
        self.min_gap = min_gap
        self.fallback_indent = fallback_indent

        self._text = text
        self._transactions = parse_ledger(text)

    @classmethod
    def load(cls, store: KeyValueStore, **kwargs) -> "LedgerDocument":
        """Create a document from the text saved in ``store``, or an empty one."""
        text = store.get(LEDGER_TEXT_KEY)
        document = cls(text=text or "", store=store, **kwargs)
        logger.debug(
            "Loaded ledger: %d transactions, %d characters",
            len(document.transactions),
            len(document.text),
        )
        return document

    @classmethod
    def from_config(cls, config: Config) -> "LedgerDocument":
        """Open the document saved in the configured state file."""
        return cls.load(
            JsonKeyValueStore(config.store_file),
            amount_column=config.editor.amount_column,
            min_gap=config.editor.min_gap,
            fallback_indent=config.editor.fallback_indent,
        )

    @property
    def text(self) -> str:
        """Current raw ledger text."""
        return self._text

    @property
    def transactions(self) -> list[Transaction]:
        """Transactions parsed from the current text."""
        return self._transactions

    def posting(self, transaction_index: int, posting_index: int) -> Posting:
        """
        Look up a posting by position.

        Raises:
            IndexError: If either index is out of range
        """
        if not 0 <= transaction_index < len(self._transactions):
            raise IndexError(f"No transaction at index {transaction_index}")

        postings = self._transactions[transaction_index].postings
        if not 0 <= posting_index < len(postings):
            raise IndexError(f"Transaction {transaction_index} has no posting at index {posting_index}")

        return postings[posting_index]

    def replace_text(self, text: str) -> None:
        """Replace the raw text wholesale, reparse and flush."""
        self._text = text
        self._transactions = parse_ledger(text)
        self.flush()

    def apply_account_edit(self, transaction_index: int, posting_index: int, new_account: str) -> str:
        """
        Change one posting's account.

        Returns:
            The rewritten raw line

        Raises:
            IndexError: If the indexes don't address a posting
            ValueError: If the account contains a line break
        """
        source_line = self.posting(transaction_index, posting_index).source_line

        self._text, self._transactions = apply_account_edit(
            self._text,
            self._transactions,
            transaction_index,
            posting_index,
            new_account,
            amount_column=self.amount_column,
            min_gap=self.min_gap,
            fallback_indent=self.fallback_indent,
        )
        self.flush()

        return self._text.split("\n")[source_line]

    def flush(self) -> None:
        """Write the raw text to the store verbatim."""
        if self.store is None:
            return
        self.store.set(LEDGER_TEXT_KEY, self._text)

    # Account options and preferences

    def account_options(self) -> list[str]:
        """Accounts offered as edit targets."""
        if self.store is not None:
            text = self.store.get(ACCOUNT_OPTIONS_KEY)
            if text is not None:
                return parse_account_options(text)
        return list(DEFAULT_ACCOUNT_OPTIONS)

    def set_account_options_text(self, text: str) -> None:
        """Store the raw account-options text as given."""
        self._require_store().set(ACCOUNT_OPTIONS_KEY, text)

    @property
    def fixed_account(self) -> str | None:
        """Account whose postings are left alone during review."""
        return self._get_preference(FIXED_ACCOUNT_KEY)

    @fixed_account.setter
    def fixed_account(self, account: str | None) -> None:
        self._set_preference(FIXED_ACCOUNT_KEY, account)

    @property
    def highlighted_account(self) -> str | None:
        """Account whose postings are marked in the structured view."""
        return self._get_preference(HIGHLIGHTED_ACCOUNT_KEY)

    @highlighted_account.setter
    def highlighted_account(self, account: str | None) -> None:
        self._set_preference(HIGHLIGHTED_ACCOUNT_KEY, account)

    def _get_preference(self, key: str) -> str | None:
        if self.store is None:
            return None
        return self.store.get(key) or None

    def _set_preference(self, key: str, account: str | None) -> None:
        store = self._require_store()
        if account:
            store.set(key, account)
        else:
            store.delete(key)

    def _require_store(self) -> KeyValueStore:
        if self.store is None:
            raise ValueError("This document has no store to save preferences in")
        return self.store
