"""Billing feature classes."""
