"""Core analysis engine, configuration and data structures."""
