#!/usr/bin/env python3
"""
End-to-end tests for the ledgeredit package.

These tests execute actual CLI commands via subprocess against a temporary
data directory, so no real ledger is ever touched.
"""
