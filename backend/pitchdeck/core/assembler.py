"""
Deck assembly: outline -> sequential slide expansion -> GeneratedDeck.

Slides are expanded strictly in outline order.  Slide *n*'s instruction embeds
a digest of slides *1..n-1*, so the loop cannot be parallelised without
breaking narrative chaining.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from datetime import datetime, timezone

from pitchdeck.core.config import settings
from pitchdeck.core.expander import expand_slide
from pitchdeck.core.gateway import TextGateway
from pitchdeck.core.outline import generate_outline
from pitchdeck.schemas.deck_content import (
    GeneratedDeck,
    PitchDeckOutline,
    SlideContent,
    StartupContext,
)

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """Return current UTC datetime with timezone info."""
    return datetime.now(timezone.utc)


def deck_title(context: StartupContext) -> str:
    if context.company_name:
        return f"{context.company_name} Pitch Deck"
    if context.industry:
        return f"{context.industry} Pitch Deck"
    return "Pitch Deck"


async def assemble_deck(
    context: StartupContext,
    gateway: TextGateway,
    *,
    outline: PitchDeckOutline | None = None,
    theme: str | None = None,
    pacing_seconds: float | None = None,
) -> GeneratedDeck:
    """Build a complete deck for *context*.

    Parameters
    ----------
    context:
        The session's startup context.
    gateway:
        Generative text gateway shared by every call in this assembly.
    outline:
        A caller-approved outline.  When omitted the outline is generated.
    theme:
        Theme identifier bound to the deck; defaults to ``settings.DEFAULT_THEME``.
    pacing_seconds:
        Delay between consecutive expansions; defaults to
        ``settings.SLIDE_PACING_SECONDS``.

    Only an exception from outline generation propagates; individual slide
    expansions fall back on their own.
    """
    if outline is None:
        outline = await generate_outline(context, gateway)
    if pacing_seconds is None:
        pacing_seconds = settings.SLIDE_PACING_SECONDS

    slides: list[SlideContent] = []
    for index, stub in enumerate(outline.slides):
        if index and pacing_seconds > 0:
            await asyncio.sleep(pacing_seconds)
        # Pass a snapshot so the expander only ever sees slides before this one.
        slide = await expand_slide(stub, context, list(slides), gateway)
        slides.append(slide)
        logger.info("Expanded slide %d/%d: %s", index + 1, len(outline.slides), stub.title)

    return GeneratedDeck(
        id=f"deck_{uuid.uuid4().hex[:12]}",
        title=deck_title(context),
        theme=theme or settings.DEFAULT_THEME,
        created_at=utc_now(),
        slides=slides,
        context=context,
    )
