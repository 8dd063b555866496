"""Adaptador HTTP (FastAPI)."""
