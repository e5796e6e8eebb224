"""Loaders and error types shared by the CLI and library callers."""
