from fastapi import APIRouter, Depends

from pitchdeck.api.deps import get_gateway
from pitchdeck.controllers import generation_controller
from pitchdeck.core.gateway import TextGateway
from pitchdeck.schemas.deck_content import GuidedQuestion
from pitchdeck.schemas.generation import QuestionsRequest

router = APIRouter(prefix="/questions", tags=["questions"])


@router.post("", response_model=list[GuidedQuestion])
async def guided_questions(
    body: QuestionsRequest,
    gateway: TextGateway = Depends(get_gateway),
):
    """Draft answers to the core pitch questions from a free-text description."""
    return await generation_controller.create_questions(body.startup_description, gateway)
