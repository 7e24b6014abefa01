"""MCP server exposing Anki review data and actions through AnkiConnect."""

__version__ = "1.0.0"
