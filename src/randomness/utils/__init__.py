"""Shared helpers: typed errors, logging setup and constants."""
