#!/usr/bin/env python3
"""
Integration tests for the ledger and accounts commands.

Each test runs the real CLI against a state file in the test data directory.
"""

import json

import pytest
from click.testing import CliRunner

from ledgeredit.cli.main import main
from ledgeredit.core.config import get_config
from ledgeredit.core.datastore import LEDGER_TEXT_KEY, JsonKeyValueStore


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def ledger_file(temp_dir, multi_ledger):
    path = temp_dir / "journal.ledger"
    path.write_text(multi_ledger, encoding="utf-8")
    return path


@pytest.fixture
def loaded(runner, ledger_file):
    """Load the multi-transaction ledger into the state file."""
    result = runner.invoke(main, ["ledger", "load", str(ledger_file)])
    assert result.exit_code == 0, result.output
    return ledger_file


def saved_text() -> str:
    return JsonKeyValueStore(get_config().store_file).get(LEDGER_TEXT_KEY)


@pytest.mark.integration
@pytest.mark.cli
class TestLedgerLoadShowExport:
    """Test getting text in and out."""

    def test_load_reports_counts(self, runner, ledger_file, multi_ledger):
        """Test loading a ledger file."""
        result = runner.invoke(main, ["ledger", "load", str(ledger_file)])

        assert result.exit_code == 0
        assert "Loaded 3 transactions (6 postings)" in result.output
        assert saved_text() == multi_ledger

    def test_load_keeps_crlf(self, runner, temp_dir):
        """Test that Windows line endings are stored as they are."""
        path = temp_dir / "crlf.ledger"
        path.write_bytes(b"2024-01-01 a\r\n    assets:cash  $1.00\r\n")

        result = runner.invoke(main, ["ledger", "load", str(path)])

        assert result.exit_code == 0
        assert saved_text() == "2024-01-01 a\r\n    assets:cash  $1.00\r\n"

    def test_load_missing_file(self, runner, temp_dir):
        """Test that a missing file is rejected by click."""
        result = runner.invoke(main, ["ledger", "load", str(temp_dir / "missing.ledger")])

        assert result.exit_code == 2

    def test_show_empty(self, runner):
        """Test show with nothing loaded."""
        result = runner.invoke(main, ["ledger", "show"])

        assert result.exit_code == 0
        assert "No transactions in the ledger." in result.output

    def test_show_lists_positions(self, runner, loaded):
        """Test the structured view."""
        result = runner.invoke(main, ["ledger", "show"])

        assert result.exit_code == 0
        assert "[1] 2024-01-06 * lunch with team" in result.output
        assert "1. liabilities:creditcard:hsbcrevo" in result.output
        assert "Total: 3 transactions, 6 postings" in result.output

    def test_show_json(self, runner, loaded):
        """Test JSON output of the structured view."""
        result = runner.invoke(main, ["ledger", "show", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [t["header"] for t in data] == ["2024-01-05 groceries", "2024-01-06 * lunch with team", "2024-01-07 salary"]
        assert data[0]["postings"][1] == {"account": "assets:cash", "amount": "$-45.00", "source_line": 2}

    def test_show_marks_highlighted_and_fixed(self, runner, loaded):
        """Test preference markers in the structured view."""
        runner.invoke(main, ["accounts", "highlight", "assets:cash"])
        runner.invoke(main, ["accounts", "fix", "income:salary"])

        result = runner.invoke(main, ["ledger", "show"])

        assert "* 1. assets:cash" in result.output
        assert "(fixed)" in result.output

    def test_export_stdout_is_verbatim(self, runner, loaded, multi_ledger):
        """Test exporting to stdout."""
        result = runner.invoke(main, ["ledger", "export"])

        assert result.exit_code == 0
        assert result.output == multi_ledger

    def test_export_keeps_escape_sequences(self, runner, temp_dir):
        """Test that stdout export doesn't strip ANSI escapes from the text."""
        text = "2024-01-01 \x1b[31mred\x1b[0m\n    assets:cash  $1.00\n"
        path = temp_dir / "ansi.ledger"
        path.write_text(text, encoding="utf-8")
        runner.invoke(main, ["ledger", "load", str(path)])

        result = runner.invoke(main, ["ledger", "export"])

        assert result.exit_code == 0
        assert result.output == text

    def test_export_to_file(self, runner, loaded, temp_dir, multi_ledger):
        """Test exporting to a file."""
        output = temp_dir / "out" / "journal.ledger"

        result = runner.invoke(main, ["ledger", "export", "--output", str(output)])

        assert result.exit_code == 0
        assert output.read_bytes() == multi_ledger.encode("utf-8")


@pytest.mark.integration
@pytest.mark.cli
class TestLedgerEdit:
    """Test single edits from the command line."""

    def test_edit_rewrites_one_line(self, runner, loaded, multi_ledger):
        """Test a successful edit."""
        result = runner.invoke(main, ["ledger", "edit", "0", "0", "expenses:food:dailymeals"])

        assert result.exit_code == 0
        assert "Line 2:     expenses:food:dailymeals" in result.output

        old_lines = multi_ledger.split("\n")
        new_lines = saved_text().split("\n")
        assert new_lines[1] == "    expenses:food:dailymeals" + " " * 6 + "$45.00"
        assert new_lines[:1] + new_lines[2:] == old_lines[:1] + old_lines[2:]

    def test_edit_out_of_range(self, runner, loaded, multi_ledger):
        """Test that a bad position is a clean error and changes nothing."""
        result = runner.invoke(main, ["ledger", "edit", "7", "0", "assets:cash"])

        assert result.exit_code == 1
        assert "No transaction at index 7" in result.output
        assert saved_text() == multi_ledger

    def test_edit_warns_when_posting_lost(self, runner, loaded):
        """Test the warning for an account that breaks the posting line."""
        result = runner.invoke(main, ["ledger", "edit", "0", "0", "cash$box"])

        assert result.exit_code == 0
        assert "no longer recognized as a posting" in result.output

    def test_edit_rejects_line_break(self, runner, loaded, multi_ledger):
        """Test that an account spanning two lines is refused and nothing changes."""
        result = runner.invoke(main, ["ledger", "edit", "0", "0", "x\ny"])

        assert result.exit_code == 1
        assert "single line" in result.output
        assert saved_text() == multi_ledger

    def test_status(self, runner, loaded):
        """Test the status summary."""
        result = runner.invoke(main, ["ledger", "status"])

        assert result.exit_code == 0
        assert "Transactions: 3" in result.output
        assert "Postings: 6" in result.output
        assert "values saved, updated today" in result.output

    def test_corrupt_state_file(self, runner):
        """Test that a corrupt state file is reported, not a traceback."""
        store_file = get_config().store_file
        store_file.write_text("[]", encoding="utf-8")

        result = runner.invoke(main, ["ledger", "show"])

        assert result.exit_code == 1
        assert "not a JSON object" in result.output


@pytest.mark.integration
@pytest.mark.cli
class TestLedgerReview:
    """Test the interactive review loop."""

    def test_review_changes_and_skips(self, runner, loaded):
        """Test picking an account for the first posting and skipping the rest."""
        # search "dailymeals" (single match), then Enter for the other five
        result = runner.invoke(main, ["ledger", "review"], input="dailymeals\n" + "\n" * 5)

        assert result.exit_code == 0, result.output
        assert "Review complete: 1 postings changed" in result.output
        assert saved_text().split("\n")[1].startswith("    expenses:food:dailymeals ")

    def test_review_skips_fixed_account(self, runner, loaded):
        """Test that postings on the fixed account aren't offered."""
        runner.invoke(main, ["accounts", "fix", "assets:cash"])

        result = runner.invoke(main, ["ledger", "review"], input="\n" * 5)

        assert result.exit_code == 0, result.output
        assert "0. expenses:food:groceries" in result.output
        assert "1. assets:cash" not in result.output

    def test_review_include_fixed(self, runner, loaded):
        """Test --include-fixed."""
        runner.invoke(main, ["accounts", "fix", "assets:cash"])

        result = runner.invoke(main, ["ledger", "review", "--include-fixed"], input="\n" * 6)

        assert result.exit_code == 0, result.output
        assert "1. assets:cash" in result.output

    def test_review_uses_stored_options(self, runner, loaded, temp_dir):
        """Test that review offers the stored account list."""
        options_file = temp_dir / "accounts.txt"
        options_file.write_text("custom:one\ncustom:two\n", encoding="utf-8")
        runner.invoke(main, ["accounts", "load", str(options_file)])

        result = runner.invoke(main, ["ledger", "review"], input="custom\n2\n" + "\n" * 5)

        assert result.exit_code == 0, result.output
        assert saved_text().split("\n")[1].startswith("    custom:two ")

    def test_review_empty_ledger(self, runner):
        """Test review with nothing loaded."""
        result = runner.invoke(main, ["ledger", "review"])

        assert result.exit_code == 0
        assert "No transactions in the ledger." in result.output


@pytest.mark.integration
@pytest.mark.cli
class TestAccountsCommands:
    """Test account options and preferences."""

    def test_list_defaults(self, runner):
        """Test the built-in list."""
        result = runner.invoke(main, ["accounts", "list", "--search", "dailymeals"])

        assert result.exit_code == 0
        assert result.output.strip() == "expenses:food:dailymeals"

    def test_load_and_list(self, runner, temp_dir):
        """Test replacing the options."""
        options_file = temp_dir / "accounts.txt"
        options_file.write_text("assets:cash\n\n  expenses:misc\n", encoding="utf-8")

        result = runner.invoke(main, ["accounts", "load", str(options_file)])
        assert result.exit_code == 0
        assert "Loaded 2 account options" in result.output

        result = runner.invoke(main, ["accounts", "list"])
        assert result.output.splitlines() == ["assets:cash", "expenses:misc"]

    def test_list_no_match(self, runner):
        """Test an empty search result."""
        result = runner.invoke(main, ["accounts", "list", "--search", "zzz-nothing"])

        assert "No matching accounts." in result.output

    def test_fix_show_and_clear(self, runner):
        """Test the fixed account preference."""
        result = runner.invoke(main, ["accounts", "fix", "assets:cash"])
        assert "Fixed account set to assets:cash" in result.output

        result = runner.invoke(main, ["accounts", "fix"])
        assert "Fixed account: assets:cash" in result.output

        result = runner.invoke(main, ["accounts", "list", "--search", "assets:cash"])
        assert "assets:cash  (fixed)" in result.output

        result = runner.invoke(main, ["accounts", "fix", "--clear"])
        assert "Cleared fixed account." in result.output

        result = runner.invoke(main, ["accounts", "fix"])
        assert "Fixed account: -" in result.output

    def test_highlight_unknown_account_warns(self, runner):
        """Test setting a preference outside the options."""
        result = runner.invoke(main, ["accounts", "highlight", "made:up"])

        assert result.exit_code == 0
        assert "not in the account options" in result.output
        assert "Highlighted account set to made:up" in result.output
