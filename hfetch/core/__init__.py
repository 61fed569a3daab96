"""Core host-facts collection and rendering for hfetch."""
