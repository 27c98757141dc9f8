"""
Test Suite for the Ledger Account Editor

Test Structure:
- unit/: Unit tests mirroring the src/ package structure
- integration/: CLI and configuration tests through click's CliRunner
- e2e/: CLI commands executed via subprocess
"""
