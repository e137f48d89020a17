"""revchain - reverse-delta revision history for auto-saved text documents."""

__version__ = "0.1.0"
