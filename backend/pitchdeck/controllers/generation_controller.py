import logging

from fastapi import HTTPException

from pitchdeck.core.assembler import assemble_deck
from pitchdeck.core.errors import DeckInputError
from pitchdeck.core.gateway import TextGateway
from pitchdeck.core.outline import generate_outline
from pitchdeck.core.questions import generate_guided_questions
from pitchdeck.schemas.deck_content import (
    GeneratedDeck,
    GuidedQuestion,
    PitchDeckOutline,
    StartupContext,
)

logger = logging.getLogger(__name__)


async def create_outline(context: StartupContext, gateway: TextGateway) -> PitchDeckOutline:
    """Generate the outline for a new session."""
    return await generate_outline(context, gateway)


async def create_deck(
    context: StartupContext,
    outline: PitchDeckOutline | None,
    theme: str | None,
    gateway: TextGateway,
) -> GeneratedDeck:
    """Expand an (approved or freshly generated) outline into a full deck."""
    if outline is not None and not outline.slides:
        raise HTTPException(status_code=400, detail="Outline must contain at least one slide.")

    deck = await assemble_deck(context, gateway, outline=outline, theme=theme)
    logger.info("Deck %s generated with %d slides", deck.id, len(deck.slides))
    return deck


async def create_questions(description: str, gateway: TextGateway) -> list[GuidedQuestion]:
    try:
        return await generate_guided_questions(description, gateway)
    except DeckInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
