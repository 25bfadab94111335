"""Command line interface for the factom client."""
