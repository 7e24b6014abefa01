"""Tests for MCP resources."""

import json
import re
from unittest.mock import AsyncMock

import pytest

from anki_review_mcp.client import AnkiAPIError
from anki_review_mcp.exceptions import InvalidRequestError
from anki_review_mcp.resources import ResourceHandler, keyword_from_uri
from anki_review_mcp.retriever import CardRetriever


@pytest.fixture
def handler(retriever: CardRetriever) -> ResourceHandler:
    return ResourceHandler(retriever)


class TestListResources:
    """Tests for the static resource catalog."""

    def test_three_search_resources(self, handler: ResourceHandler) -> None:
        resources = handler.list_resources()

        assert [str(r.uri) for r in resources] == [
            "anki://search/deckcurrent",
            "anki://search/isdue",
            "anki://search/isnew",
        ]
        assert [r.name for r in resources] == ["Current Deck", "Due cards", "New cards"]

    def test_all_json(self, handler: ResourceHandler) -> None:
        assert all(r.mimeType == "application/json" for r in handler.list_resources())
        assert all(r.description for r in handler.list_resources())

    def test_catalog_is_not_shared(self, handler: ResourceHandler) -> None:
        handler.list_resources().clear()
        assert len(handler.list_resources()) == 3

    def test_search_template(self, handler: ResourceHandler) -> None:
        (template,) = handler.list_resource_templates()
        assert template.uriTemplate == "anki://search/{keyword}"
        assert template.mimeType == "application/json"


class TestKeywordFromUri:
    """Tests for keyword_from_uri."""

    @pytest.mark.parametrize(
        ("uri", "keyword"),
        [
            ("anki://search/isdue", "isdue"),
            ("anki://search/deckcurrent", "deckcurrent"),
            ("anki://search/nested/isnew", "isnew"),
            ("anki://search/tag%3Averbs", "tag:verbs"),
            ("anki://search/deck%3AGerman%20is%3Adue", "deck:German is:due"),
        ],
    )
    def test_last_segment(self, uri: str, keyword: str) -> None:
        assert keyword_from_uri(uri) == keyword

    @pytest.mark.parametrize("uri", ["anki://search", "anki://search/", "anki://"])
    def test_missing_segment(self, uri: str) -> None:
        with pytest.raises(InvalidRequestError, match="Invalid resource URI"):
            keyword_from_uri(uri)


class TestReadResource:
    """Tests for ResourceHandler.read_resource."""

    @pytest.mark.asyncio
    async def test_new_cards_as_plain_json(
        self,
        handler: ResourceHandler,
        mock_client: AsyncMock,
        due_cards_info: list[dict],
    ) -> None:
        mock_client.find_cards.return_value = [103, 101, 105, 102, 104]
        mock_client.cards_info.return_value = due_cards_info

        contents = await handler.read_resource("anki://search/isnew")

        mock_client.find_cards.assert_awaited_once_with("is:new")
        assert str(contents.uri) == "anki://search/isnew"
        assert contents.mimeType == "application/json"

        cards = json.loads(contents.text)
        assert [card["cardId"] for card in cards] == [101, 102, 103, 104, 105]
        assert set(cards[0]) == {"cardId", "question", "answer", "due"}
        for card in cards:
            for text in (card["question"], card["answer"]):
                assert not re.search(r"<[a-z/][^>]*>", text)
                assert "&nbsp;" not in text
                assert "&amp;" not in text
                assert ".card" not in text

    @pytest.mark.asyncio
    async def test_empty_result(self, handler: ResourceHandler) -> None:
        contents = await handler.read_resource("anki://search/deckcurrent")
        assert contents.text == "[]"

    @pytest.mark.asyncio
    async def test_invalid_uri_makes_no_store_call(
        self, handler: ResourceHandler, mock_client: AsyncMock
    ) -> None:
        with pytest.raises(InvalidRequestError):
            await handler.read_resource("anki://search/")

        mock_client.find_cards.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_store_failure_reraised_unchanged(
        self, handler: ResourceHandler, mock_client: AsyncMock
    ) -> None:
        error = AnkiAPIError("invalid search")
        mock_client.find_cards.side_effect = error

        with pytest.raises(AnkiAPIError) as exc_info:
            await handler.read_resource("anki://search/isdue")

        assert exc_info.value is error
