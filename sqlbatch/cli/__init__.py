"""Command-line interface for sqlbatch."""
