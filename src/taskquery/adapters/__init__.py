"""Adapters – concrete task stores (in-memory, SQLAlchemy)."""
