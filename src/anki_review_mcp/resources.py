"""MCP resources: read-only card lists addressed by ``anki://search/<keyword>``."""

from urllib.parse import unquote, urlsplit

from mcp.types import Resource, ResourceTemplate, TextResourceContents

from .exceptions import InvalidRequestError
from .logging import get_logger
from .models import dump_cards
from .retriever import CardRetriever

logger = get_logger(component="resources")

JSON_MIME_TYPE = "application/json"
SEARCH_URI_PREFIX = "anki://search/"

RESOURCES = (
    Resource(
        uri=f"{SEARCH_URI_PREFIX}deckcurrent",
        mimeType=JSON_MIME_TYPE,
        name="Current Deck",
        description="Current Anki deck",
    ),
    Resource(
        uri=f"{SEARCH_URI_PREFIX}isdue",
        mimeType=JSON_MIME_TYPE,
        name="Due cards",
        description="Cards in review and learning waiting to be studied",
    ),
    Resource(
        uri=f"{SEARCH_URI_PREFIX}isnew",
        mimeType=JSON_MIME_TYPE,
        name="New cards",
        description="All unseen cards",
    ),
)

RESOURCE_TEMPLATES = (
    ResourceTemplate(
        uriTemplate=SEARCH_URI_PREFIX + "{keyword}",
        mimeType=JSON_MIME_TYPE,
        name="Card search",
        description=(
            "Cards matching a search keyword, ordered by due. Keywords starting with "
            "'deck' or 'is' are shorthand (deckcurrent, isdue, isnew); anything else "
            "is a percent-encoded Anki search query."
        ),
    ),
)


def keyword_from_uri(uri: str) -> str:
    """Extract the search keyword (last path segment) from a resource URI.

    Raises:
        InvalidRequestError: The URI has no path segment
    """
    keyword = unquote(urlsplit(uri).path.rsplit("/", 1)[-1])
    if not keyword:
        raise InvalidRequestError(f"Invalid resource URI: {uri}", context={"uri": uri})
    return keyword


class ResourceHandler:
    """Answers resource listing and reading requests."""

    def __init__(self, retriever: CardRetriever):
        self.retriever = retriever

    def list_resources(self) -> list[Resource]:
        return list(RESOURCES)

    def list_resource_templates(self) -> list[ResourceTemplate]:
        return list(RESOURCE_TEMPLATES)

    async def read_resource(self, uri: str) -> TextResourceContents:
        """Read the cards behind a resource URI.

        Args:
            uri: Resource URI, e.g. ``anki://search/isdue``

        Returns:
            JSON array of cards under the requested URI

        Raises:
            InvalidRequestError: The URI has no path segment
            UpstreamError: AnkiConnect failed; logged, then re-raised unchanged
        """
        keyword = keyword_from_uri(uri)

        try:
            cards = await self.retriever.retrieve(keyword)
        except Exception:
            logger.exception("resource_read_failed", uri=uri, keyword=keyword)
            raise

        return TextResourceContents(uri=uri, mimeType=JSON_MIME_TYPE, text=dump_cards(cards))
