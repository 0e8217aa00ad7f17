"""Shopfront - storefront and admin backend for a single online shop."""
