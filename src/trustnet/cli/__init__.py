"""Command line interface for trustnet."""
