"""Utility functions for hfetch."""
