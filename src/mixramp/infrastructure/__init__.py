"""Adapters for decoding libraries and logging."""
