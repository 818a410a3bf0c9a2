"""Command-line interface for skapa."""
