"""Adapters – concrete data sources (memory, SQLAlchemy)."""
