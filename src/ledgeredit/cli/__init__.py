"""
Command Line Interface Package

Unified CLI for loading, reviewing and editing a plaintext ledger.

Command Structure:
- ledgeredit: Main entry point with utility commands (version, config)
- ledgeredit ledger: Load, show, export, edit and review the saved ledger
- ledgeredit accounts: Account options and the fixed/highlighted preferences

Every command works on the ledger saved in the state file; edits are written
back to it immediately.
"""
