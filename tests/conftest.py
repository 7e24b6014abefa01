"""Pytest configuration and fixtures."""

from unittest.mock import AsyncMock

import pytest

from anki_review_mcp.client import AnkiClient
from anki_review_mcp.retriever import CardRetriever

CARD_STYLE = "<style>.card { font-family: arial; color: black; }</style>"


@pytest.fixture
def mock_client() -> AsyncMock:
    """AnkiConnect client stub with no cards."""
    client = AsyncMock(spec=AnkiClient)
    client.find_cards = AsyncMock(return_value=[])
    client.cards_info = AsyncMock(return_value=[])
    client.answer_cards = AsyncMock(return_value=[])
    client.add_note = AsyncMock(return_value=1700000000000)
    return client


@pytest.fixture
def retriever(mock_client: AsyncMock) -> CardRetriever:
    return CardRetriever(mock_client)


@pytest.fixture
def due_cards_info() -> list[dict]:
    """cardsInfo records for five due cards, returned out of due order."""
    return [
        {
            "cardId": 103,
            "question": f"{CARD_STYLE}<div>Capital of <b>Italy</b>?</div>",
            "answer": f"{CARD_STYLE}<div>Capital of <b>Italy</b>?</div><hr id=answer><div>Rome</div>",
            "due": 30,
            "deckName": "Geography",
        },
        {
            "cardId": 101,
            "question": f"{CARD_STYLE}Capital of France?",
            "answer": f"{CARD_STYLE}Capital of France?<hr id=answer>Paris[anki:play:a:0]",
            "due": 10,
            "deckName": "Geography",
        },
        {
            "cardId": 105,
            "question": "H<sub>2</sub>O is&nbsp;called?",
            "answer": "Water &amp; ice",
            "due": 50,
            "deckName": "Chemistry",
        },
        {
            "cardId": 102,
            "question": "<div>2 &lt; 3?</div>",
            "answer": "<div>Yes</div>",
            "due": 20,
            "deckName": "Math",
        },
        {
            "cardId": 104,
            "question": "<i>Say &quot;hello&quot;</i>",
            "answer": "Hallo",
            "due": 40,
            "deckName": "German",
        },
    ]
