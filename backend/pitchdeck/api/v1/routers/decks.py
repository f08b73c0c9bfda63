from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from pitchdeck.api.deps import get_gateway
from pitchdeck.controllers import deck_controller, generation_controller
from pitchdeck.core.gateway import TextGateway
from pitchdeck.schemas.deck_content import DeckPreview, DeckReview, GeneratedDeck
from pitchdeck.schemas.generation import DeckRequest, ExportRequest, GenerateDeckRequest

router = APIRouter(prefix="/decks", tags=["decks"])


@router.post("", response_model=GeneratedDeck)
async def generate_deck(
    body: GenerateDeckRequest,
    gateway: TextGateway = Depends(get_gateway),
):
    """Generate a full deck, slide by slide, from the context and an optional outline."""
    return await generation_controller.create_deck(body.context, body.outline, body.theme, gateway)


@router.post("/export", response_class=HTMLResponse)
def export_deck(body: ExportRequest):
    """Render the deck as a self-contained HTML presentation."""
    return HTMLResponse(deck_controller.export_deck(body.deck, body.theme))


@router.post("/preview", response_model=DeckPreview)
def preview_deck(body: DeckRequest):
    return deck_controller.preview_deck(body.deck)


@router.post("/review", response_model=DeckReview)
def review_deck(body: DeckRequest):
    """Score the deck and list content warnings."""
    return deck_controller.review(body.deck)
