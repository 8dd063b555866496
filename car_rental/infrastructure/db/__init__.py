"""Adaptadores SQL (SQLAlchemy async)."""
