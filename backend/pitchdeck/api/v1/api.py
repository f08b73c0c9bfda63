"""API v1: aggregates all routers under a single prefix."""

from fastapi import APIRouter

from pitchdeck.api.v1.routers import decks, outline, questions, revisions, themes

router = APIRouter()
router.include_router(outline.router)
router.include_router(decks.router)
router.include_router(revisions.router)
router.include_router(questions.router)
router.include_router(themes.router)
