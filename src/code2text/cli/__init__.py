"""Command-line interface for code2text."""
