"""Command line interface for askaws."""
