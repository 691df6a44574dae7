"""Command-line interface for Anima."""
