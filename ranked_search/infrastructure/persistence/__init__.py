"""Persistence: SQL engine and full-text search statements."""
