"""Command line interface for rdmtext."""
