"""Command-line interface for hfetch."""
