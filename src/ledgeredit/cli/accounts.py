#!/usr/bin/env python3
"""
Accounts CLI - Account Options and Preferences

Manages the list of accounts offered during review, and the fixed and
highlighted account preferences.
"""

from pathlib import Path

import click

from ..core.options import filter_account_options
from .ledger import open_document


@click.group()
def accounts() -> None:
    """Account option and preference commands."""
    pass


@accounts.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def load(file: Path) -> None:
    """
    Replace the account options with FILE (one account per line).

    Examples:
      ledgeredit accounts load accounts.txt
    """
    document = open_document()

    text = file.read_text(encoding="utf-8")
    document.set_account_options_text(text)

    click.echo(f"✅ Loaded {len(document.account_options())} account options from {file}")


@accounts.command(name="list")
@click.option("--search", "-s", default="", help="Only show accounts containing this text")
def list_accounts(search: str) -> None:
    """
    List the account options.

    Examples:
      ledgeredit accounts list
      ledgeredit accounts list --search food
    """
    document = open_document()
    options = filter_account_options(document.account_options(), search)

    if not options:
        click.echo("No matching accounts.")
        return

    fixed = document.fixed_account
    highlighted = document.highlighted_account

    for option in options:
        tags = []
        if option == fixed:
            tags.append("fixed")
        if option == highlighted:
            tags.append("highlighted")
        suffix = f"  ({', '.join(tags)})" if tags else ""
        click.echo(f"{option}{suffix}")


def _update_preference(name: str, account: str | None, clear: bool) -> None:
    document = open_document()

    if clear:
        setattr(document, f"{name}_account", None)
        click.echo(f"Cleared {name} account.")
        return

    if account is None:
        current = getattr(document, f"{name}_account")
        click.echo(f"{name.capitalize()} account: {current or '-'}")
        return

    if account not in document.account_options():
        click.echo(f"⚠️  '{account}' is not in the account options")

    setattr(document, f"{name}_account", account)
    click.echo(f"✅ {name.capitalize()} account set to {account}")


@accounts.command()
@click.argument("account", required=False)
@click.option("--clear", is_flag=True, help="Remove the fixed account")
def fix(account: str | None, clear: bool) -> None:
    """
    Show or set the fixed account.

    Postings on the fixed account are skipped by 'ledgeredit ledger review'.

    Examples:
      ledgeredit accounts fix assets:cash
      ledgeredit accounts fix --clear
    """
    _update_preference("fixed", account, clear)


@accounts.command()
@click.argument("account", required=False)
@click.option("--clear", is_flag=True, help="Remove the highlighted account")
def highlight(account: str | None, clear: bool) -> None:
    """
    Show or set the highlighted account.

    Postings on the highlighted account are marked in 'ledgeredit ledger show'.

    Examples:
      ledgeredit accounts highlight expenses:uncat
    """
    _update_preference("highlighted", account, clear)
