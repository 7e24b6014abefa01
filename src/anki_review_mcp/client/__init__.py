"""AnkiConnect client module."""

from .anki_client import AnkiAPIError, AnkiClient, AnkiConnectionError

__all__ = ["AnkiAPIError", "AnkiClient", "AnkiConnectionError"]
