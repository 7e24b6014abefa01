"""Tool dispatch: decode arguments, run the tool, wrap the text result."""

from typing import Any

from mcp.types import TextContent, Tool
from pydantic import ValidationError

from ..client import AnkiClient
from ..exceptions import CardLookupError, InvalidRequestError, PartialFailureError, UnknownToolError
from ..logging import get_logger
from ..models import (
    AddCardArguments,
    AddCardCall,
    CardCountArguments,
    GetDueCardsCall,
    GetNewCardsCall,
    ToolCall,
    ToolCallAdapter,
    UpdateCardsArguments,
    UpdateCardsCall,
    dump_cards,
)
from ..retriever import CardRetriever
from .catalog import TOOL_NAMES, TOOLS

logger = get_logger(component="tools")

DUE_KEYWORD = "isdue"
NEW_KEYWORD = "isnew"


def _field_path(loc: tuple) -> str:
    """Dotted path of an error location relative to the tool's arguments."""
    parts = list(loc)
    if "arguments" in parts:
        parts = parts[parts.index("arguments") + 1 :]
    return ".".join(str(part) for part in parts) or "arguments"


def decode_tool_call(name: str, arguments: dict[str, Any] | None) -> ToolCall:
    """Validate raw tool arguments into a typed tool call.

    Raises:
        InvalidRequestError: Arguments are missing or do not match the tool's schema
        UnknownToolError: No tool with this name
    """
    if arguments is None:
        raise InvalidRequestError(f"No arguments provided for tool: {name}", context={"tool": name})
    if name not in TOOL_NAMES:
        raise UnknownToolError(f"Unknown tool: {name}", context={"tool": name})

    try:
        return ToolCallAdapter.validate_python({"tool": name, "arguments": arguments})
    except ValidationError as e:
        problems = "; ".join(f"{_field_path(err['loc'])}: {err['msg']}" for err in e.errors())
        raise InvalidRequestError(
            f"Invalid arguments for tool {name}: {problems}", context={"tool": name}
        ) from e


class ToolHandler:
    """Answers tool listing and tool invocation requests."""

    def __init__(
        self,
        client: AnkiClient,
        retriever: CardRetriever,
        deck_name: str = "Default",
        model_name: str = "Basic",
    ):
        """Initialize tool handler.

        Args:
            client: AnkiConnect client for writes
            retriever: Card retriever for reads
            deck_name: Deck that add_card creates notes in
            model_name: Note type used by add_card (needs Front and Back fields)
        """
        self.client = client
        self.retriever = retriever
        self.deck_name = deck_name
        self.model_name = model_name

    def list_tools(self) -> list[Tool]:
        return list(TOOLS)

    async def call_tool(self, name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
        """Invoke a tool by name.

        Args:
            name: Tool name from the catalog
            arguments: Raw arguments from the request, ``None`` if absent

        Returns:
            Single text content with the tool's result

        Raises:
            InvalidRequestError: Missing or invalid arguments
            UnknownToolError: Unknown tool name
            PartialFailureError: update_cards had rejected answers
            UpstreamError: AnkiConnect failed
        """
        call = decode_tool_call(name, arguments)
        logger.info("tool_called", tool=call.tool)

        if isinstance(call, UpdateCardsCall):
            text = await self.update_cards(call.arguments)
        elif isinstance(call, AddCardCall):
            text = await self.add_card(call.arguments)
        elif isinstance(call, GetDueCardsCall):
            text = await self.get_cards(DUE_KEYWORD, call.arguments)
        elif isinstance(call, GetNewCardsCall):
            text = await self.get_cards(NEW_KEYWORD, call.arguments)
        else:
            raise UnknownToolError(f"Unknown tool: {name}", context={"tool": name})

        return [TextContent(type="text", text=text)]

    async def update_cards(self, args: UpdateCardsArguments) -> str:
        """Submit review answers in one batch; all-or-nothing from the caller's view.

        Answers Anki accepted are not rolled back when others fail.
        """
        answers = [answer.model_dump(by_alias=True) for answer in args.answers]
        results = await self.client.answer_cards(answers)

        updated: list[int] = []
        failed: list[int] = []
        for index, answer in enumerate(args.answers):
            ok = index < len(results) and bool(results[index])
            (updated if ok else failed).append(answer.card_id)

        if failed:
            raise PartialFailureError(failed_card_ids=failed, updated_card_ids=updated)

        return f"Updated cards {', '.join(str(card_id) for card_id in updated)}"

    async def add_card(self, args: AddCardArguments) -> str:
        """Create a note and report the id of the card it generated."""
        note = {
            "deckName": self.deck_name,
            "modelName": self.model_name,
            "fields": {"Front": args.front, "Back": args.back},
        }
        note_id = await self.client.add_note(note)

        card_ids = await self.client.find_cards(f"nid:{note_id}")
        if not card_ids:
            raise CardLookupError(
                f"Anki created note {note_id} but returned no card for it",
                context={"note_id": note_id},
            )

        return f"Created card with id {card_ids[0]}"

    async def get_cards(self, keyword: str, args: CardCountArguments) -> str:
        # num <= 0 yields an empty list rather than slicing from the end
        cards = await self.retriever.retrieve(keyword)
        return dump_cards(cards[: max(args.num, 0)])
