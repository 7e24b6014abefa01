"""Exception hierarchy for the Anki review MCP server.

Protocol-level errors (bad requests, unknown tools) are kept apart from
upstream errors raised while talking to AnkiConnect, so the server shell
can report the former as request errors and let the latter through with
their original message.
"""

from __future__ import annotations


class AnkiReviewError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, *, context: dict[str, object] | None = None) -> None:
        """Initialize error with message and optional context.

        Args:
            message: Human-readable error description.
            context: Additional key-value pairs for structured logging.
        """
        super().__init__(message)
        self.context = context or {}


class InvalidRequestError(AnkiReviewError):
    """Malformed protocol input (missing URI segment, missing or invalid arguments)."""


class UnknownToolError(AnkiReviewError):
    """Tool name does not match any tool in the catalog."""


class PartialFailureError(AnkiReviewError):
    """Some submitted answers were rejected by Anki.

    Answers that Anki accepted stay applied; they are listed in
    ``updated_card_ids`` for logging only.
    """

    def __init__(self, failed_card_ids: list[int], updated_card_ids: list[int]) -> None:
        ids = ", ".join(str(card_id) for card_id in failed_card_ids)
        super().__init__(
            f"Failed to update cards with IDs: {ids}",
            context={"failed_card_ids": failed_card_ids, "updated_card_ids": updated_card_ids},
        )
        self.failed_card_ids = failed_card_ids
        self.updated_card_ids = updated_card_ids


class UpstreamError(AnkiReviewError):
    """Base class for errors raised by or about the AnkiConnect store."""


class CardLookupError(UpstreamError):
    """Anki returned no card for a note that was just created."""
