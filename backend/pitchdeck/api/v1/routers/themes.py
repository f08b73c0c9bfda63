from fastapi import APIRouter

from pitchdeck.controllers import deck_controller
from pitchdeck.schemas.theme import ThemeDescriptor

router = APIRouter(prefix="/themes", tags=["themes"])


@router.get("", response_model=list[ThemeDescriptor])
def list_themes():
    return deck_controller.get_themes()


@router.get("/{theme_id}", response_model=ThemeDescriptor)
def get_theme(theme_id: str):
    return deck_controller.get_theme(theme_id)
