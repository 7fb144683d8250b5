"""File selection for code2text.

This package decides, entry by entry, which files end up in the concatenated output.
It combines the exclusion rules with content-based binary detection.
"""
