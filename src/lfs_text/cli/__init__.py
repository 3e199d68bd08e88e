"""Command line interface for lfs-text."""
