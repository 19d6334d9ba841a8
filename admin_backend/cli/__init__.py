"""Command-line interface for the admin backend."""
