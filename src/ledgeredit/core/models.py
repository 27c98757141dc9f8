#!/usr/bin/env python3
"""
Core Data Models for the Ledger Account Editor

Structured view of a plaintext ledger. These records are derived state: they
are rebuilt from the raw text after every change and never edited in place.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Posting:
    """
    One account/amount line inside a transaction.

    The amount is kept as the literal token from the text (e.g. "$-12.50") so
    it can be written back byte for byte.
    """

    account: str
    amount: str
    # Zero-based index of the physical line; valid until the next parse
    source_line: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "account": self.account,
            "amount": self.amount,
            "source_line": self.source_line,
        }


@dataclass
class Transaction:
    """A header line plus the postings that follow it, in appearance order."""

    header: str
    start_line: int
    postings: list[Posting] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "header": self.header,
            "start_line": self.start_line,
            "postings": [posting.to_dict() for posting in self.postings],
        }

    @property
    def accounts(self) -> list[str]:
        """Account names of all postings, in order."""
        return [posting.account for posting in self.postings]
