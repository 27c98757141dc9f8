#!/usr/bin/env python3
"""
Account Selector - searchable account picker for the terminal.

Works like a searchable dropdown: type part of an account name, pick one of
the matches by number. Entering nothing means "no selection".
"""

from collections.abc import Callable

import click

from ..core.options import filter_account_options

# Matches shown per search; narrower queries reach the rest
MAX_LISTED = 20


def prompt_for_account(
    options: list[str],
    current: str | None = None,
    prompt_fn: Callable[..., str] = click.prompt,
    confirm_fn: Callable[..., bool] = click.confirm,
) -> str | None:
    """
    Ask the user for an account.

    An exact option name or a query with a single match is taken directly.
    A query matching nothing can be accepted as a new account name.

    Args:
        options: Accounts to offer
        current: Account currently on the posting, shown as context
        prompt_fn: Prompt function (click.prompt signature)
        confirm_fn: Confirmation function (click.confirm signature)

    Returns:
        The chosen account, or None if the user entered nothing
    """
    if current:
        click.echo(f"  Current: {current}")

    while True:
        query = prompt_fn("  Search accounts", default="", show_default=False).strip()
        if not query:
            return None

        if query in options:
            return query

        matches = filter_account_options(options, query)

        if not matches:
            if confirm_fn(f"  No account matches '{query}'. Use it as a new account?", default=False):
                return query
            continue

        if len(matches) == 1:
            click.echo(f"  -> {matches[0]}")
            return matches[0]

        listed = matches[:MAX_LISTED]
        for number, option in enumerate(listed, start=1):
            marker = " (current)" if option == current else ""
            click.echo(f"  {number:>3}. {option}{marker}")
        if len(matches) > len(listed):
            click.echo(f"  ... {len(matches) - len(listed)} more, refine the search to see them")

        choice = prompt_fn("  Pick a number (Enter to search again)", default="", show_default=False).strip()
        if not choice:
            continue

        if choice.isdigit() and 1 <= int(choice) <= len(listed):
            return listed[int(choice) - 1]

        click.echo(f"  ❌ Invalid choice: {choice}")
