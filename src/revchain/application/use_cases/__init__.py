"""Use cases - one class per external operation."""
