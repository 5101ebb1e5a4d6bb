"""Command line interface for jyrolint."""
