"""Hoist test suite."""
