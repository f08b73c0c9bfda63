import logging

from fastapi import HTTPException

from pitchdeck.core.errors import DeckInputError, SlideNotFoundError
from pitchdeck.core.gateway import TextGateway
from pitchdeck.core.revision import (
    revise_deck_slide,
    revise_deck_wide,
    revise_field,
    suggest_improvement,
)
from pitchdeck.schemas.deck_content import FieldRevision, GeneratedDeck
from pitchdeck.schemas.generation import (
    ReviseDeckRequest,
    ReviseFieldRequest,
    ReviseSlideRequest,
    SlideRevisionResponse,
    SuggestionRequest,
)

logger = logging.getLogger(__name__)


async def revise_field_content(body: ReviseFieldRequest, gateway: TextGateway) -> FieldRevision:
    try:
        return await revise_field(
            body.slide_title,
            body.slide_content,
            body.category,
            body.instruction,
            body.context,
            gateway,
        )
    except DeckInputError as e:
        raise HTTPException(status_code=400, detail=str(e))


async def revise_one_slide(body: ReviseSlideRequest, gateway: TextGateway) -> SlideRevisionResponse:
    """Revise a single slide by id; the rest of the deck is returned untouched."""
    try:
        deck = await revise_deck_slide(body.deck, body.slide_id, body.instruction, gateway)
    except SlideNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DeckInputError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return SlideRevisionResponse(slide=deck.find_slide(body.slide_id), deck=deck)


async def revise_whole_deck(body: ReviseDeckRequest, gateway: TextGateway) -> GeneratedDeck:
    try:
        slides = await revise_deck_wide(body.deck, body.instruction, gateway)
    except DeckInputError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info("Deck %s revised across %d slides", body.deck.id, len(slides))
    return body.deck.model_copy(update={"slides": slides})


async def suggest(body: SuggestionRequest, gateway: TextGateway) -> str:
    try:
        return await suggest_improvement(body.current_content, body.category, body.context, gateway)
    except DeckInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
