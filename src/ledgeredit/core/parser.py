#!/usr/bin/env python3
"""
Ledger Text Parser

Turns raw ledger text into an ordered list of transactions. Only a narrow
subset of the plaintext ledger format is understood: a non-indented header
line followed by indented postings whose amount is a dollar-prefixed decimal.

Anything else is left out of the structured view. The raw text is never
modified here, so nothing the parser fails to recognize is lost.
"""

import logging
import re
from collections.abc import Iterator

from .models import Posting, Transaction

logger = logging.getLogger(__name__)

# Leading whitespace, the account (everything up to the first "$"), a
# separating whitespace run, then the amount token: $, optional sign, digits,
# a decimal point and more digits.
POSTING_PATTERN = re.compile(r"^\s+([^$]+)\s+(\$[+-]?\d+\.\d+)")


def parse_ledger(text: str) -> list[Transaction]:
    """
    Parse ledger text into transactions.

    A blank line closes the open transaction; a non-indented line closes it
    too and starts the next one. Indented lines become postings of the open
    transaction when they match POSTING_PATTERN and are dropped otherwise.

    Args:
        text: Raw ledger text

    Returns:
        Transactions in the order their blocks appear in the text
    """
    transactions: list[Transaction] = []
    current: Transaction | None = None

    for index, line in enumerate(text.split("\n")):
        stripped = line.strip()

        if not stripped:
            if current is not None:
                transactions.append(current)
                current = None
            continue

        if not line.startswith((" ", "\t")):
            if current is not None:
                transactions.append(current)
            current = Transaction(header=stripped, start_line=index)
            continue

        if current is None:
            logger.debug("Line %d: indented line outside a transaction, ignored", index)
            continue

        match = POSTING_PATTERN.match(line)
        if match is None:
            logger.debug("Line %d: not a recognized posting, ignored: %r", index, stripped)
            continue

        current.postings.append(
            Posting(account=match.group(1).strip(), amount=match.group(2), source_line=index)
        )

    if current is not None:
        transactions.append(current)

    return transactions


def iter_postings(transactions: list[Transaction]) -> Iterator[tuple[int, int, Transaction, Posting]]:
    """Yield (transaction_index, posting_index, transaction, posting) in document order."""
    for t_index, transaction in enumerate(transactions):
        for p_index, posting in enumerate(transaction.postings):
            yield t_index, p_index, transaction, posting
