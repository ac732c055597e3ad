"""Adapters translating between the catalog and external formats."""
