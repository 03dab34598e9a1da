"""Adapters binding civil values to persistence and serialisation libraries."""
