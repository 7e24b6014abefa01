"""Static catalog of the tools offered to the agent."""

from copy import deepcopy

from mcp.types import Tool

from ..models import AddCardArguments, CardCountArguments, UpdateCardsArguments

ADD_CARD_DESCRIPTION = """Create a new flashcard in Anki for the user. Must use HTML formatting only. IMPORTANT FORMATTING RULES:
1. Must use HTML tags for ALL formatting - NO markdown
2. Use <br> for ALL line breaks
3. For code blocks, use <pre> with inline CSS styling
4. Example formatting:
   - Line breaks: <br>
   - Code: <pre style="background-color: transparent; padding: 10px; border-radius: 5px;">
   - Lists: <ol> and <li> tags
   - Bold: <strong>
   - Italic: <em>"""


def _count_schema(description: str) -> dict:
    schema = deepcopy(CardCountArguments.model_json_schema())
    schema["properties"]["num"]["description"] = description
    return schema


TOOLS = (
    Tool(
        name="update_cards",
        description=(
            "After the user answers cards you've quizzed them on, use this tool to mark "
            "them answered and update their ease"
        ),
        inputSchema=UpdateCardsArguments.model_json_schema(by_alias=True),
    ),
    Tool(
        name="add_card",
        description=ADD_CARD_DESCRIPTION,
        inputSchema=AddCardArguments.model_json_schema(),
    ),
    Tool(
        name="get_due_cards",
        description="Returns a given number (num) of cards due for review.",
        inputSchema=_count_schema("Number of due cards to get"),
    ),
    Tool(
        name="get_new_cards",
        description="Returns a given number (num) of new and unseen cards.",
        inputSchema=_count_schema("Number of new cards to get"),
    ),
)

TOOL_NAMES = frozenset(tool.name for tool in TOOLS)
