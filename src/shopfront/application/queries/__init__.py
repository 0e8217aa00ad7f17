"""Application queries - read-only use cases."""
