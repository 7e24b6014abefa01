"""AnkiConnect HTTP client."""

from typing import Any

import httpx

from ..exceptions import UpstreamError
from ..logging import get_logger

logger = get_logger(component="anki_client")


class AnkiConnectionError(UpstreamError):
    """Raised when unable to connect to AnkiConnect."""


class AnkiAPIError(UpstreamError):
    """Raised when AnkiConnect API returns an error."""


class AnkiClient:
    """Async HTTP client for AnkiConnect API."""

    def __init__(
        self,
        url: str = "http://127.0.0.1:8765",
        version: int = 6,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize AnkiConnect client.

        Args:
            url: AnkiConnect API endpoint
            version: AnkiConnect API version
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used to stub AnkiConnect in tests)
        """
        self.url = url
        self.version = version
        self.timeout = timeout
        self._transport = transport

    async def invoke(self, action: str, params: dict[str, Any] | None = None) -> Any:
        """Call AnkiConnect API action.

        Args:
            action: API action name
            params: Action parameters

        Returns:
            API response result

        Raises:
            AnkiConnectionError: Failed to connect to Anki
            AnkiAPIError: API returned an error
        """
        payload = {"action": action, "version": self.version, "params": params or {}}
        logger.debug("anki_request", action=action, url=self.url)

        async with httpx.AsyncClient(transport=self._transport) as client:
            try:
                response = await client.post(self.url, json=payload, timeout=self.timeout)
                response.raise_for_status()
                result = response.json()
            except httpx.HTTPError as e:
                raise AnkiConnectionError(
                    f"Failed to connect to AnkiConnect at {self.url}. "
                    f"Is Anki running with AnkiConnect installed? Error: {e}",
                    context={"action": action, "url": self.url},
                ) from e
            except ValueError as e:
                raise AnkiAPIError(
                    f"AnkiConnect returned a malformed response to {action}: {e}",
                    context={"action": action},
                ) from e

        if not isinstance(result, dict):
            raise AnkiAPIError(
                f"AnkiConnect returned an unexpected response to {action}: {result!r}",
                context={"action": action},
            )
        if result.get("error"):
            raise AnkiAPIError(result["error"], context={"action": action})

        return result.get("result")

    # Note operations
    async def add_note(self, note: dict) -> int:
        """Add a single note.

        Args:
            note: Note object with deckName, modelName, fields

        Returns:
            Note ID

        Raises:
            AnkiConnectionError: Connection failed
            AnkiAPIError: Note creation failed
        """
        return await self.invoke("addNote", {"note": note})

    # Card operations
    async def find_cards(self, query: str) -> list[int]:
        """Find card IDs matching query.

        Args:
            query: Anki search query

        Returns:
            List of card IDs

        Raises:
            AnkiConnectionError: Connection failed
            AnkiAPIError: Query was rejected
        """
        return await self.invoke("findCards", {"query": query})

    async def cards_info(self, card_ids: list[int]) -> list[dict]:
        """Get information about cards.

        Args:
            card_ids: List of card IDs

        Returns:
            List of card info dictionaries, in the order of ``card_ids``

        Raises:
            AnkiConnectionError: Connection failed
        """
        return await self.invoke("cardsInfo", {"cards": card_ids})

    async def answer_cards(self, answers: list[dict]) -> list[bool]:
        """Answer cards as if reviewed in Anki.

        Args:
            answers: List of ``{"cardId": int, "ease": int}`` objects, ease 1 (Again) to 4 (Easy)

        Returns:
            One success flag per answer, in the order of ``answers``

        Raises:
            AnkiConnectionError: Connection failed
        """
        return await self.invoke("answerCards", {"answers": answers})
