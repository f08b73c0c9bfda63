import pydantic

from pitchdeck.schemas.deck_content import (
    CamelModel,
    GeneratedDeck,
    PitchDeckOutline,
    SlideCategory,
    SlideContent,
    StartupContext,
)


class GenerateOutlineRequest(CamelModel):
    context: StartupContext


class GenerateDeckRequest(CamelModel):
    context: StartupContext
    # Caller-approved outline; generated when omitted.
    outline: PitchDeckOutline | None = None
    theme: str | None = None


class ReviseFieldRequest(CamelModel):
    slide_title: str
    slide_content: str
    category: SlideCategory = pydantic.Field(alias="slideType")
    instruction: str
    context: StartupContext


class ReviseSlideRequest(CamelModel):
    deck: GeneratedDeck
    slide_id: int
    instruction: str


class ReviseDeckRequest(CamelModel):
    deck: GeneratedDeck
    instruction: str


class SuggestionRequest(CamelModel):
    current_content: str
    category: SlideCategory = pydantic.Field(alias="slideType")
    context: StartupContext


class SuggestionResponse(CamelModel):
    suggestion: str


class QuestionsRequest(CamelModel):
    startup_description: str


class ExportRequest(CamelModel):
    deck: GeneratedDeck
    # Falls back to the deck's own theme.
    theme: str | None = None


class DeckRequest(CamelModel):
    deck: GeneratedDeck


class SlideRevisionResponse(CamelModel):
    slide: SlideContent
    deck: GeneratedDeck
