"""Pydantic models for cards, answers and tool calls."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Card(BaseModel):
    """A card as returned to the agent: plain text, ordered by due."""

    model_config = ConfigDict(populate_by_name=True)

    card_id: int = Field(alias="cardId", description="Anki card ID")
    question: str = Field(description="Question side as plain text")
    answer: str = Field(description="Answer side as plain text")
    due: int = Field(description="Anki due value; lower is reviewed sooner")


CardList = TypeAdapter(list[Card])


def dump_cards(cards: list[Card]) -> str:
    """Serialize cards to a compact JSON array using the ``cardId`` alias."""
    return CardList.dump_json(cards, by_alias=True).decode()


class CardAnswer(BaseModel):
    """Review answer for a single card."""

    model_config = ConfigDict(populate_by_name=True)

    card_id: int = Field(alias="cardId", description="Id of the card to answer")
    ease: int = Field(ge=1, le=4, description="Ease of the card between 1 (Again) and 4 (Easy)")


# Tool arguments


class UpdateCardsArguments(BaseModel):
    """Arguments of update_cards."""

    answers: list[CardAnswer] = Field(description="Answers to submit, one per reviewed card")


class AddCardArguments(BaseModel):
    """Arguments of add_card."""

    front: str = Field(description="The front of the card. Must use HTML formatting only.")
    back: str = Field(description="The back of the card. Must use HTML formatting only.")


class CardCountArguments(BaseModel):
    """Arguments of get_due_cards and get_new_cards."""

    num: int = Field(description="Number of cards to get")


# Tool calls, discriminated by tool name


class UpdateCardsCall(BaseModel):
    tool: Literal["update_cards"] = "update_cards"
    arguments: UpdateCardsArguments


class AddCardCall(BaseModel):
    tool: Literal["add_card"] = "add_card"
    arguments: AddCardArguments


class GetDueCardsCall(BaseModel):
    tool: Literal["get_due_cards"] = "get_due_cards"
    arguments: CardCountArguments


class GetNewCardsCall(BaseModel):
    tool: Literal["get_new_cards"] = "get_new_cards"
    arguments: CardCountArguments


ToolCall = Annotated[
    UpdateCardsCall | AddCardCall | GetDueCardsCall | GetNewCardsCall,
    Field(discriminator="tool"),
]

ToolCallAdapter = TypeAdapter(ToolCall)
