"""Console rendering helpers for the CLI."""
