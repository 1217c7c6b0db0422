"""Property substrate layer.

This module defines the flat property storage contract the store
builds on, plus an in-memory substrate for hosts and tests.
"""
