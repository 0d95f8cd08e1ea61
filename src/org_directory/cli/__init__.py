"""Command line interface for the organization directory."""
