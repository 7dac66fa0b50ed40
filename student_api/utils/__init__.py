"""Shared helpers: logging setup and constants."""
