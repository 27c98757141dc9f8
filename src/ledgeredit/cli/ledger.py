#!/usr/bin/env python3
"""
Ledger CLI - Load, Review and Edit Commands

Command-line interface for the saved ledger: replacing its text, showing the
structured view, and changing posting accounts one at a time or interactively.
"""

from pathlib import Path

import click

from ..core.config import get_config
from ..core.datastore import JsonKeyValueStore
from ..core.document import LedgerDocument
from ..core.json_utils import format_json
from .selection import prompt_for_account


def open_document() -> LedgerDocument:
    """Open the configured ledger document, reporting a corrupt state file as a CLI error."""
    config = get_config()
    try:
        return LedgerDocument.from_config(config)
    except ValueError as e:
        raise click.ClickException(str(e))


def _count_postings(document: LedgerDocument) -> int:
    return sum(len(transaction.postings) for transaction in document.transactions)


@click.group()
def ledger() -> None:
    """Ledger text and posting account commands."""
    pass


@ledger.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def load(ctx: click.Context, file: Path, verbose: bool) -> None:
    """
    Replace the saved ledger with the contents of FILE.

    The text is stored exactly as read, line endings included.

    Examples:
      ledgeredit ledger load journal.ledger
    """
    document = open_document()

    # newline="" keeps \r\n endings as they are in the file
    with open(file, encoding="utf-8", newline="") as f:
        text = f.read()

    document.replace_text(text)

    if verbose or (ctx.obj or {}).get("verbose", False):
        click.echo(f"State file: {get_config().store_file}")

    click.echo(
        f"✅ Loaded {len(document.transactions)} transactions "
        f"({_count_postings(document)} postings) from {file}"
    )


@ledger.command()
@click.option("--json", "as_json", is_flag=True, help="Print the structured view as JSON")
def show(as_json: bool) -> None:
    """
    Show the structured view of the saved ledger.

    Postings on the highlighted account are marked with '*'.

    Examples:
      ledgeredit ledger show
      ledgeredit ledger show --json
    """
    document = open_document()

    if as_json:
        click.echo(format_json([transaction.to_dict() for transaction in document.transactions]))
        return

    if not document.transactions:
        click.echo("No transactions in the ledger.")
        return

    highlighted = document.highlighted_account
    fixed = document.fixed_account

    for t_index, transaction in enumerate(document.transactions):
        click.echo(f"[{t_index}] {transaction.header}")
        for p_index, posting in enumerate(transaction.postings):
            marker = "*" if highlighted and posting.account == highlighted else " "
            suffix = "  (fixed)" if fixed and posting.account == fixed else ""
            click.echo(f"  {marker} {p_index}. {posting.account:<40} {posting.amount:>12}{suffix}")
        click.echo()

    click.echo(f"Total: {len(document.transactions)} transactions, {_count_postings(document)} postings")


@ledger.command()
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Write to file instead of stdout")
def export(output: Path | None) -> None:
    """
    Write the saved ledger text, unchanged.

    Examples:
      ledgeredit ledger export
      ledgeredit ledger export --output journal.ledger
    """
    document = open_document()

    if output is None:
        click.echo(document.text, nl=False, color=True)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    with open(output, "w", encoding="utf-8", newline="") as f:
        f.write(document.text)

    click.echo(f"✅ Wrote {len(document.text)} characters to {output}")


@ledger.command()
@click.argument("transaction_index", type=int)
@click.argument("posting_index", type=int)
@click.argument("account")
def edit(transaction_index: int, posting_index: int, account: str) -> None:
    """
    Set the account of one posting.

    TRANSACTION_INDEX and POSTING_INDEX are the numbers shown by
    'ledgeredit ledger show'.

    Examples:
      ledgeredit ledger edit 0 1 expenses:food:groceries
    """
    document = open_document()

    try:
        posting = document.posting(transaction_index, posting_index)
        postings_before = len(document.transactions[transaction_index].postings)
        new_line = document.apply_account_edit(transaction_index, posting_index, account)
    except (IndexError, ValueError) as e:
        raise click.ClickException(str(e))

    click.echo(f"Line {posting.source_line + 1}: {new_line}")

    if len(document.transactions[transaction_index].postings) < postings_before:
        click.echo("⚠️  The rewritten line is no longer recognized as a posting")


@ledger.command()
@click.option("--include-fixed", is_flag=True, help="Also review postings on the fixed account")
def review(include_fixed: bool) -> None:
    """
    Walk through every posting and pick its account.

    Press Enter at the search prompt to keep a posting as it is.

    Examples:
      ledgeredit ledger review
    """
    document = open_document()

    if not document.transactions:
        click.echo("No transactions in the ledger.")
        return

    options = document.account_options()
    fixed = None if include_fixed else document.fixed_account
    changed = 0

    # Positions are re-read after every edit: an edit may drop a posting
    t_index = 0
    while t_index < len(document.transactions):
        p_index = 0
        while p_index < len(document.transactions[t_index].postings):
            transaction = document.transactions[t_index]
            posting = transaction.postings[p_index]

            if fixed and posting.account == fixed:
                p_index += 1
                continue

            click.echo(f"\n[{t_index}] {transaction.header}")
            click.echo(f"  {p_index}. {posting.account}  {posting.amount}")

            choice = prompt_for_account(options, current=posting.account)

            if choice is None or choice == posting.account:
                click.echo("  Skipped.")
            else:
                postings_before = len(transaction.postings)
                try:
                    document.apply_account_edit(t_index, p_index, choice)
                except ValueError as e:
                    click.echo(f"  ❌ {e}")
                    continue
                changed += 1
                click.echo("  ✅ Updated.")

                if len(document.transactions[t_index].postings) < postings_before:
                    click.echo("  ⚠️  The rewritten line is no longer recognized as a posting")
                    continue

            p_index += 1
        t_index += 1

    click.echo(f"\nReview complete: {changed} postings changed")


@ledger.command()
def status() -> None:
    """Show where the ledger is saved and what it holds."""
    config = get_config()
    document = open_document()

    click.echo("Ledger Status:")
    click.echo(f"  State File: {config.store_file}")
    click.echo(f"  Store: {JsonKeyValueStore(config.store_file).summary_text()}")
    click.echo(f"  Transactions: {len(document.transactions)}")
    click.echo(f"  Postings: {_count_postings(document)}")
    click.echo(f"  Account Options: {len(document.account_options())}")
    click.echo(f"  Fixed Account: {document.fixed_account or '-'}")
    click.echo(f"  Highlighted Account: {document.highlighted_account or '-'}")
