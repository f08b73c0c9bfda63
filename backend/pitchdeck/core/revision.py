"""
Revision engine: instruction-driven rewrites of already generated slides.

Every operation returns a complete replacement (never a partial patch) and
degrades to a visible, non-destructive fallback when the upstream reply is
unusable.  Only caller misuse (blank instruction, unknown slide id) raises.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field, field_validator

from pitchdeck.core.errors import DeckInputError, SlideNotFoundError
from pitchdeck.core.expander import SlidePayload
from pitchdeck.core.gateway import TextGateway
from pitchdeck.core.json_extract import decode_model, extract_json
from pitchdeck.core.prompts import (
    build_field_revision_prompt,
    build_slide_revision_prompt,
    build_suggestion_prompt,
    frame_deck_wide_instruction,
)
from pitchdeck.schemas.deck_content import (
    FieldRevision,
    GeneratedDeck,
    SlideCategory,
    SlideContent,
    StartupContext,
)

logger = logging.getLogger(__name__)

FIELD_REVISION_MAX_OUTPUT = 1000
SLIDE_REVISION_MAX_OUTPUT = 2000
SUGGESTION_MAX_OUTPUT = 500


class _FieldRevisionPayload(BaseModel):
    improved_title: str = Field(alias="improvedTitle")
    improved_content: str = Field(alias="improvedContent")

    @field_validator("improved_title", "improved_content")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class _SlideRevisionPayload(SlidePayload):
    title: str

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title must not be blank")
        return v


def _require_instruction(instruction: str) -> str:
    instruction = (instruction or "").strip()
    if not instruction:
        raise DeckInputError("Revision instruction must not be blank")
    return instruction


# ---------------------------------------------------------------------------
# Fallbacks
# ---------------------------------------------------------------------------

def field_revision_fallback(slide_title: str, slide_content: str, instruction: str) -> FieldRevision:
    return FieldRevision(
        title=slide_title,
        content=f"{slide_content} (Enhanced based on your request: {instruction})",
    )


def slide_revision_fallback(slide: SlideContent, instruction: str) -> SlideContent:
    content = slide.content.model_copy(
        update={"headline": f"{slide.content.headline} (Improved based on: {instruction})"}
    )
    return slide.model_copy(
        update={"title": f"{slide.title} (Enhanced)", "content": content}
    )


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

async def revise_field(
    slide_title: str,
    slide_content: str,
    category: SlideCategory,
    instruction: str,
    context: StartupContext,
    gateway: TextGateway,
) -> FieldRevision:
    """Light touch-up returning an improved title and content summary."""
    instruction = _require_instruction(instruction)
    prompt = build_field_revision_prompt(slide_title, slide_content, category, instruction, context)
    response = await gateway.invoke(prompt, FIELD_REVISION_MAX_OUTPUT)

    payload = decode_model(response, _FieldRevisionPayload, what="field revision")
    if payload is None:
        return field_revision_fallback(slide_title, slide_content, instruction)
    return FieldRevision(title=payload.improved_title, content=payload.improved_content)


async def revise_slide(
    slide: SlideContent,
    instruction: str,
    context: StartupContext,
    gateway: TextGateway,
    *,
    deck_wide: bool = False,
) -> SlideContent:
    """Rebuild the whole slide body from *instruction*.

    The result always keeps the original ``id`` and ``category``.  With
    ``deck_wide=True`` the instruction is framed as a change applied across
    the presentation; the fallback still quotes the caller's own words.
    """
    instruction = _require_instruction(instruction)
    framed = frame_deck_wide_instruction(instruction, slide) if deck_wide else instruction
    prompt = build_slide_revision_prompt(slide, framed, context)
    response = await gateway.invoke(prompt, SLIDE_REVISION_MAX_OUTPUT)

    payload = decode_model(response, _SlideRevisionPayload, what=f"slide {slide.id} revision")
    if payload is None:
        logger.warning("Using fallback revision for slide %d", slide.id)
        return slide_revision_fallback(slide, instruction)

    return SlideContent(
        id=slide.id,
        title=payload.title,
        category=slide.category,
        content=payload.content,
    )


async def revise_deck_wide(
    deck: GeneratedDeck,
    instruction: str,
    gateway: TextGateway,
) -> list[SlideContent]:
    """Apply *instruction* to every slide in turn.

    Each slide is revised independently against the unmodified deck context,
    and each falls back on its own; count and order are preserved.
    """
    instruction = _require_instruction(instruction)
    revised: list[SlideContent] = []
    for slide in deck.slides:
        revised.append(
            await revise_slide(slide, instruction, deck.context, gateway, deck_wide=True)
        )
    logger.info("Deck-wide revision applied to %d slides", len(revised))
    return revised


async def revise_deck_slide(
    deck: GeneratedDeck,
    slide_id: int,
    instruction: str,
    gateway: TextGateway,
) -> GeneratedDeck:
    """Revise one slide by id and return a new deck with only that slide replaced."""
    slide = deck.find_slide(slide_id)
    if slide is None:
        raise SlideNotFoundError(slide_id)

    revised = await revise_slide(slide, instruction, deck.context, gateway)
    slides = [revised if s.id == slide_id else s for s in deck.slides]
    return deck.model_copy(update={"slides": slides})


async def suggest_improvement(
    current_content: str,
    category: SlideCategory,
    context: StartupContext,
    gateway: TextGateway,
) -> str:
    """Return a free-text improvement suggestion for a piece of slide content."""
    current_content = (current_content or "").strip()
    if not current_content:
        raise DeckInputError("Content to improve must not be empty")

    response = (await gateway.invoke(
        build_suggestion_prompt(current_content, category, context),
        SUGGESTION_MAX_OUTPUT,
    )).strip()

    # The suggestion is prose; a JSON reply (demo envelope or canned payload) is unusable.
    if not response or extract_json(response, "{") is not None:
        return (
            f"Back the {category.value} slide with one concrete, sourced figure "
            f"specific to {context.industry or 'your market'} and lead with the outcome "
            f"it delivers for {context.audience}."
        )
    return response
