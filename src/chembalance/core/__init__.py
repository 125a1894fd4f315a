"""Core models, parsers and exceptions."""
