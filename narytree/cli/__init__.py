"""Command-line interface for Narytree."""
