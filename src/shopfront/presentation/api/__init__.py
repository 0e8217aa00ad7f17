"""Shopfront REST API (FastAPI)."""
