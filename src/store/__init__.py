"""Chunked key/value storage layer.

This module maps logical keys and JSON values onto size-limited
physical property entries, with a per-scope key index cache.
"""
