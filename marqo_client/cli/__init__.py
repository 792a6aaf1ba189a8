"""Command line interface for the Marqo client."""
