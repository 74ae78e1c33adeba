"""Command-line interface for Passphraser."""
