"""Persistence implementations for shopfront_auth."""
