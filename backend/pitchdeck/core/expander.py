"""Slide expansion: one outline stub -> one fully structured slide."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel

from pitchdeck.core.gateway import TextGateway
from pitchdeck.core.json_extract import decode_model
from pitchdeck.core.prompts import build_slide_prompt
from pitchdeck.schemas.deck_content import (
    SlideBody,
    SlideCategory,
    SlideContent,
    SlideStub,
    StartupContext,
)

logger = logging.getLogger(__name__)

SLIDE_MAX_OUTPUT = 2000


class SlidePayload(BaseModel):
    """Loose shape of a slide as returned upstream; only ``content`` is mandatory."""

    id: Any = None
    title: Any = None
    type: Any = None
    content: SlideBody


def qa_chat_slide(stub: SlideStub) -> SlideContent:
    """Hand-authored interactive Q&A slide; this category is never generated."""
    return SlideContent(
        id=stub.id,
        title=stub.title,
        category=SlideCategory.qa_chat,
        content=SlideBody(
            headline="Interactive Q&A Session",
            subheadline="Real-time questions and answers with investors",
            bullets=[
                "Live chat interface for investor questions",
                "Real-time responses from the presentation team",
                "Recorded Q&A session for follow-up",
                "Direct engagement with potential investors",
            ],
            callout="This is your opportunity to address investor concerns and showcase your expertise",
            next_steps=[
                "Prepare for common investor questions",
                "Have key metrics and data ready",
                "Be ready to elaborate on any slide content",
            ],
        ),
    )


def fallback_slide(stub: SlideStub, context: StartupContext) -> SlideContent:
    """Minimal schema-valid slide used when expansion output is unusable."""
    return SlideContent(
        id=stub.id,
        title=stub.title,
        category=stub.category,
        content=SlideBody(
            headline=f"{stub.title} for {context.topic}",
            bullets=[
                "Key point about this section",
                "Supporting detail with context",
                "Important insight for investors",
            ],
            callout="This is why it matters for your business",
        ),
    )


async def expand_slide(
    stub: SlideStub,
    context: StartupContext,
    prior_slides: list[SlideContent],
    gateway: TextGateway,
) -> SlideContent:
    """Expand *stub* into a full slide.

    Parameters
    ----------
    stub:
        The outline entry to expand.  Its ``id``, ``title`` and ``category``
        are carried onto the result unchanged.
    context:
        The session's startup context.
    prior_slides:
        Slides already expanded earlier in the deck, in order.  Only their
        titles and headlines reach the prompt.  Not mutated.
    gateway:
        Generative text gateway.
    """
    if stub.category == SlideCategory.qa_chat:
        return qa_chat_slide(stub)

    prompt = build_slide_prompt(stub, context, list(prior_slides))
    response = await gateway.invoke(prompt, SLIDE_MAX_OUTPUT)

    payload = decode_model(response, SlidePayload, what=f"slide {stub.id} content")
    if payload is None:
        logger.warning("Using fallback content for slide %d (%s)", stub.id, stub.title)
        return fallback_slide(stub, context)

    return SlideContent(
        id=stub.id,
        title=stub.title,
        category=stub.category,
        content=payload.content,
    )
