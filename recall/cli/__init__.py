"""Command-line interface for Recall."""
