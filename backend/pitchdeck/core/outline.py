"""Outline generation: business description -> ordered list of slide stubs."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ValidationError, field_validator

from pitchdeck.core.gateway import TextGateway
from pitchdeck.core.json_extract import extract_json
from pitchdeck.core.prompts import build_outline_prompt
from pitchdeck.schemas.deck_content import (
    PitchDeckOutline,
    SlideCategory,
    SlideStub,
    StartupContext,
)

logger = logging.getLogger(__name__)

OUTLINE_MAX_OUTPUT = 1500

_DEFAULT_STUBS: list[tuple[str, SlideCategory, str]] = [
    ("Company Overview", SlideCategory.title, "Company name, tagline, and mission"),
    ("The Problem", SlideCategory.problem, "Market pain points and opportunity"),
    ("Our Solution", SlideCategory.solution, "Product overview and value proposition"),
    ("Market Opportunity", SlideCategory.market, "Market size and growth potential"),
    ("Product Demo", SlideCategory.product, "Key features and user experience"),
    ("Traction", SlideCategory.traction, "Growth metrics and achievements"),
    ("Business Model", SlideCategory.business_model, "Revenue model and unit economics"),
    ("Team", SlideCategory.team, "Key team members and advisors"),
    ("Financial Projections", SlideCategory.financials, "Revenue projections and key metrics"),
    ("Funding Ask", SlideCategory.ask, "Investment amount and use of funds"),
    ("Q&A Session", SlideCategory.qa_chat, "Interactive Q&A with investors"),
]

_KNOWN_CATEGORIES = {c.value for c in SlideCategory}


class _RawStub(BaseModel):
    title: str
    type: Any = None
    contentSummary: str = ""

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title must not be blank")
        return v


class _RawOutline(BaseModel):
    slides: list[_RawStub]


def default_outline(slide_count: int) -> PitchDeckOutline:
    """The fixed outline used whenever the upstream outline is unusable.

    Ten canonical slides plus a closing Q&A; truncated when fewer are requested.
    """
    stubs = [
        SlideStub(id=i, title=title, category=category, content_summary=summary)
        for i, (title, category, summary) in enumerate(_DEFAULT_STUBS, start=1)
    ][:max(slide_count, 1)]
    return PitchDeckOutline(slides=stubs, total_slides=len(stubs))


def _coerce_category(raw: Any, title: str) -> SlideCategory:
    value = str(raw or "").strip().lower().replace("_", "-").replace(" ", "-")
    if value in _KNOWN_CATEGORIES:
        return SlideCategory(value)
    logger.warning("Unknown slide type %r for %r; using appendix", raw, title)
    return SlideCategory.appendix


def normalise_outline(data: Any, slide_count: int) -> PitchDeckOutline | None:
    """Validate a decoded outline and renumber it ``1..n``.

    Returns ``None`` when the payload has no usable stubs.
    """
    try:
        raw = _RawOutline.model_validate(data)
    except ValidationError as e:
        logger.warning("Invalid outline: %s", e.errors(include_url=False))
        return None

    if not raw.slides:
        logger.warning("Outline contained no slides")
        return None

    stubs = [
        SlideStub(
            id=i,
            title=stub.title,
            category=_coerce_category(stub.type, stub.title),
            content_summary=stub.contentSummary.strip(),
        )
        for i, stub in enumerate(raw.slides[:slide_count], start=1)
    ]
    return PitchDeckOutline(slides=stubs, total_slides=len(stubs))


async def generate_outline(context: StartupContext, gateway: TextGateway) -> PitchDeckOutline:
    """Produce the slide outline for *context*.

    Never fails on bad upstream output: an unparseable or empty outline is
    replaced by :func:`default_outline`.
    """
    response = await gateway.invoke(build_outline_prompt(context), OUTLINE_MAX_OUTPUT)

    data = extract_json(response, "{")
    outline = normalise_outline(data, context.slide_count) if data is not None else None
    if outline is None:
        logger.warning("Falling back to default outline (%d slides requested)", context.slide_count)
        return default_outline(context.slide_count)

    logger.info("Generated outline with %d slides", outline.total_slides)
    return outline
