"""Card lookup: search, fetch, clean and order."""

from operator import attrgetter

from .client import AnkiClient
from .formatting import clean_card_html
from .logging import get_logger
from .models import Card
from .queries import format_query

logger = get_logger(component="retriever")


class CardRetriever:
    """Fetches cards for a search keyword, ordered by due."""

    def __init__(self, client: AnkiClient):
        """Initialize retriever.

        Args:
            client: AnkiConnect client used for every lookup
        """
        self.client = client

    async def retrieve(self, keyword: str) -> list[Card]:
        """Get all cards matching a keyword, most urgent first.

        Args:
            keyword: Search shorthand (``isdue``, ``deckcurrent``) or raw Anki query

        Returns:
            Cards with plain-text question/answer, sorted ascending by due.
            Cards with equal due keep the order Anki returned them in.

        Raises:
            UpstreamError: AnkiConnect failed or rejected the query
        """
        query = format_query(keyword)
        card_ids = await self.client.find_cards(query)
        if not card_ids:
            logger.debug("cards_retrieved", query=query, count=0)
            return []

        cards_info = await self.client.cards_info(card_ids)
        cards = [
            Card(
                card_id=info["cardId"],
                question=clean_card_html(info["question"]),
                answer=clean_card_html(info["answer"]),
                due=info["due"],
            )
            for info in cards_info
        ]
        cards.sort(key=attrgetter("due"))

        logger.debug("cards_retrieved", query=query, count=len(cards))
        return cards
