"""Adapters for diffing and persistence."""
