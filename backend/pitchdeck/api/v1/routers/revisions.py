from fastapi import APIRouter, Depends

from pitchdeck.api.deps import get_gateway
from pitchdeck.controllers import revision_controller
from pitchdeck.core.gateway import TextGateway
from pitchdeck.schemas.deck_content import FieldRevision, GeneratedDeck
from pitchdeck.schemas.generation import (
    ReviseDeckRequest,
    ReviseFieldRequest,
    ReviseSlideRequest,
    SlideRevisionResponse,
    SuggestionRequest,
    SuggestionResponse,
)

router = APIRouter(prefix="/revisions", tags=["revisions"])


@router.post("/field", response_model=FieldRevision)
async def revise_field(
    body: ReviseFieldRequest,
    gateway: TextGateway = Depends(get_gateway),
):
    """Touch up a slide's title and content summary."""
    return await revision_controller.revise_field_content(body, gateway)


@router.post("/slide", response_model=SlideRevisionResponse)
async def revise_slide(
    body: ReviseSlideRequest,
    gateway: TextGateway = Depends(get_gateway),
):
    """Rebuild one slide from an instruction."""
    return await revision_controller.revise_one_slide(body, gateway)


@router.post("/deck", response_model=GeneratedDeck)
async def revise_deck(
    body: ReviseDeckRequest,
    gateway: TextGateway = Depends(get_gateway),
):
    """Apply one instruction to every slide in the deck."""
    return await revision_controller.revise_whole_deck(body, gateway)


@router.post("/suggestion", response_model=SuggestionResponse)
async def suggest_improvement(
    body: SuggestionRequest,
    gateway: TextGateway = Depends(get_gateway),
):
    suggestion = await revision_controller.suggest(body, gateway)
    return SuggestionResponse(suggestion=suggestion)
