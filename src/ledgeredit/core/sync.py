#!/usr/bin/env python3
"""
Text/Structure Synchronization

Applies an account edit made on the structured view back to the raw ledger
text. Exactly one physical line is rewritten; the structured view is then
rebuilt by parsing the whole new text, so it can never drift from the raw
text.
"""

import logging
import re

from .config import DEFAULT_AMOUNT_COLUMN, DEFAULT_FALLBACK_INDENT, DEFAULT_MIN_GAP
from .models import Posting, Transaction
from .parser import POSTING_PATTERN, parse_ledger

logger = logging.getLogger(__name__)

_LEADING_WHITESPACE = re.compile(r"^\s+")
_LINE_BREAK = re.compile(r"[\r\n]")


def format_posting_line(
    indent: str,
    account: str,
    amount: str,
    amount_column: int = DEFAULT_AMOUNT_COLUMN,
    min_gap: int = DEFAULT_MIN_GAP,
) -> str:
    """
    Lay out a posting line.

    The amount starts ``amount_column`` characters after the start of the
    account name; longer account names get ``min_gap`` spaces instead.
    """
    padding = max(min_gap, amount_column - len(account))
    return f"{indent}{account}{' ' * padding}{amount}"


def rewrite_posting_line(
    line: str,
    account: str,
    amount: str,
    amount_column: int = DEFAULT_AMOUNT_COLUMN,
    min_gap: int = DEFAULT_MIN_GAP,
    fallback_indent: str = DEFAULT_FALLBACK_INDENT,
) -> str:
    """
    Rebuild an existing posting line around a new account name.

    The original indentation is kept (``fallback_indent`` when the line has
    none), as is a trailing carriage return.

    Raises:
        ValueError: If the account contains a line break
    """
    if _LINE_BREAK.search(account):
        raise ValueError(f"Account name must be a single line: {account!r}")

    body, line_end = (line[:-1], "\r") if line.endswith("\r") else (line, "")

    match = _LEADING_WHITESPACE.match(body)
    indent = match.group(0) if match else fallback_indent

    return format_posting_line(indent, account, amount, amount_column, min_gap) + line_end


def _locate_posting(transactions: list[Transaction], transaction_index: int, posting_index: int) -> Posting:
    if not 0 <= transaction_index < len(transactions):
        raise IndexError(
            f"Transaction index {transaction_index} out of range (document has {len(transactions)})"
        )

    postings = transactions[transaction_index].postings
    if not 0 <= posting_index < len(postings):
        raise IndexError(
            f"Posting index {posting_index} out of range "
            f"(transaction {transaction_index} has {len(postings)})"
        )

    return postings[posting_index]


def apply_account_edit(
    raw_text: str,
    transactions: list[Transaction],
    transaction_index: int,
    posting_index: int,
    new_account: str,
    *,
    amount_column: int = DEFAULT_AMOUNT_COLUMN,
    min_gap: int = DEFAULT_MIN_GAP,
    fallback_indent: str = DEFAULT_FALLBACK_INDENT,
) -> tuple[str, list[Transaction]]:
    """
    Replace the account of one posting and re-derive the structured view.

    Args:
        raw_text: Current raw ledger text
        transactions: Result of the latest parse of ``raw_text``
        transaction_index: Index of the transaction holding the posting
        posting_index: Index of the posting inside that transaction
        new_account: Account name to write
        amount_column: Target column of the amount, counted from the account start
        min_gap: Spaces kept between account and amount for long account names
        fallback_indent: Indent used if the target line has no leading whitespace

    Returns:
        Tuple of (new raw text, transactions parsed from the new raw text)

    Raises:
        IndexError: If the indexes don't address a posting, or the posting's
            line is outside ``raw_text`` (stale model)
        ValueError: If ``new_account`` contains a line break
    """
    posting = _locate_posting(transactions, transaction_index, posting_index)

    lines = raw_text.split("\n")
    if not 0 <= posting.source_line < len(lines):
        raise IndexError(f"Posting line {posting.source_line} is outside the text ({len(lines)} lines)")

    new_line = rewrite_posting_line(
        lines[posting.source_line],
        new_account,
        posting.amount,
        amount_column=amount_column,
        min_gap=min_gap,
        fallback_indent=fallback_indent,
    )
    lines[posting.source_line] = new_line
    new_text = "\n".join(lines)

    logger.debug("Rewrote line %d: %r", posting.source_line, new_line)

    if POSTING_PATTERN.match(new_line) is None:
        logger.warning(
            "Line %d no longer parses as a posting after setting account %r",
            posting.source_line,
            new_account,
        )

    return new_text, parse_ledger(new_text)
