from fastapi import APIRouter, Depends

from pitchdeck.api.deps import get_gateway
from pitchdeck.controllers import generation_controller
from pitchdeck.core.gateway import TextGateway
from pitchdeck.schemas.deck_content import PitchDeckOutline
from pitchdeck.schemas.generation import GenerateOutlineRequest

router = APIRouter(prefix="/outline", tags=["outline"])


@router.post("", response_model=PitchDeckOutline)
async def create_outline(
    body: GenerateOutlineRequest,
    gateway: TextGateway = Depends(get_gateway),
):
    """Propose a slide outline for the startup context."""
    return await generation_controller.create_outline(body.context, gateway)
