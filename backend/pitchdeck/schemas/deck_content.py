"""
Pydantic models for the pitch deck document model.

The generation pipeline turns loosely-typed model output into these models;
everything downstream (revision, export, the HTTP layer) only ever sees
validated instances.  JSON field names are camelCase to match what the
generative service is asked to produce; Python attributes are snake_case.
"""

from __future__ import annotations

import datetime
import logging
from collections import Counter
from enum import Enum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


class SlideCategory(str, Enum):
    title = "title"
    problem = "problem"
    solution = "solution"
    market = "market"
    product = "product"
    traction = "traction"
    business_model = "business-model"
    team = "team"
    financials = "financials"
    ask = "ask"
    qa_chat = "qa-chat"
    appendix = "appendix"
    video = "video"
    intro_video = "intro-video"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Session input
# ---------------------------------------------------------------------------

class StartupContext(CamelModel):
    """Immutable generation input, threaded through every pipeline call."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    topic: str = Field(min_length=1)
    industry: str = ""
    audience: str = "investors"
    slide_count: int = Field(default=10, ge=1, le=20)
    stage: str | None = None
    company_name: str | None = None
    existing_content: str | None = None

    @field_validator("topic")
    @classmethod
    def topic_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("topic must not be blank")
        return v

    @field_validator("industry", "audience")
    @classmethod
    def strip_labels(cls, v: str) -> str:
        return v.strip()

    @field_validator("stage", "company_name", "existing_content")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None


# ---------------------------------------------------------------------------
# Outline
# ---------------------------------------------------------------------------

class SlideStub(CamelModel):
    id: int = Field(ge=1)
    title: str
    category: SlideCategory = Field(alias="type")
    content_summary: str = ""


def _reject_duplicate_ids(ids: list[int]) -> None:
    dupes = sorted(i for i, n in Counter(ids).items() if n > 1)
    if dupes:
        raise ValueError(f"slide ids must be unique; duplicated: {dupes}")


class PitchDeckOutline(CamelModel):
    slides: list[SlideStub]
    # Always the length of ``slides``; any supplied value is overwritten.
    total_slides: int = 0

    @model_validator(mode="after")
    def check_slides(self) -> "PitchDeckOutline":
        _reject_duplicate_ids([s.id for s in self.slides])
        self.total_slides = len(self.slides)
        return self


# ---------------------------------------------------------------------------
# Slide content
# ---------------------------------------------------------------------------

class Metric(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, coerce_numbers_to_str=True
    )

    label: str
    value: str
    context: str | None = None


class FeatureCard(CamelModel):
    id: str
    icon: str
    icon_color: str | None = None
    title: str
    description: str
    is_highlighted: bool | None = None


class IconDescriptor(CamelModel):
    name: str
    color: str | None = None
    size: str | None = None


class GraphicDescriptor(CamelModel):
    type: str = "placeholder"
    src: str | None = None
    alt: str | None = None
    shape: str | None = None
    color: str | None = None
    size: str | None = None
    opacity: float | None = None
    rotation: float | None = None
    border_radius: str | None = None
    filter: str | None = None


class VideoDescriptor(CamelModel):
    url: str | None = None
    thumbnail: str | None = None
    duration: float | None = None
    title: str | None = None
    description: str | None = None


class SlideBody(CamelModel):
    """The ``content`` block of a slide.

    ``headline`` and ``bullets`` are mandatory and non-empty; every other
    field is optional decoration.
    """

    headline: str
    subheadline: str | None = None
    bullets: list[str]
    metrics: list[Metric] | None = None
    callout: str | None = None
    next_steps: list[str] | None = None
    icons: dict[str, IconDescriptor] | None = None
    graphics: dict[str, GraphicDescriptor] | None = None
    feature_cards: list[FeatureCard] | None = None
    video: VideoDescriptor | None = None

    @field_validator(
        "subheadline", "metrics", "callout", "next_steps",
        "icons", "graphics", "feature_cards", "video",
        mode="wrap",
    )
    @classmethod
    def drop_malformed_decoration(cls, v: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo) -> Any:
        # A bad optional field is dropped; only headline and bullets can reject a slide.
        try:
            return handler(v)
        except ValidationError as e:
            logger.warning("Dropping malformed slide field %s: %s", info.field_name, e.errors(include_url=False))
            return None

    @field_validator("headline")
    @classmethod
    def headline_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("headline must not be blank")
        return v

    @field_validator("bullets")
    @classmethod
    def bullets_not_empty(cls, v: list[str]) -> list[str]:
        bullets = [b.strip() for b in v if b and b.strip()]
        if not bullets:
            raise ValueError("bullets must contain at least one non-blank entry")
        return bullets


class SlideContent(CamelModel):
    id: int = Field(ge=1)
    title: str
    category: SlideCategory = Field(alias="type")
    content: SlideBody


class GeneratedDeck(CamelModel):
    id: str
    title: str
    theme: str = "modern"
    created_at: datetime.datetime
    slides: list[SlideContent]
    context: StartupContext

    @model_validator(mode="after")
    def unique_slide_ids(self) -> "GeneratedDeck":
        _reject_duplicate_ids([s.id for s in self.slides])
        return self

    def find_slide(self, slide_id: int) -> SlideContent | None:
        return next((s for s in self.slides if s.id == slide_id), None)


class FieldRevision(CamelModel):
    """Result of a single-field touch-up: an improved title and content summary."""

    title: str
    content: str


# ---------------------------------------------------------------------------
# Supplementary outputs
# ---------------------------------------------------------------------------

class GuidedQuestion(CamelModel):
    id: str
    question: str
    ai_answer: str


class SlidePreview(CamelModel):
    id: int
    number: int
    title: str
    category: SlideCategory = Field(alias="type")
    summary: str
    has_metrics: bool
    has_callout: bool


class DeckPreview(CamelModel):
    id: str
    title: str
    theme: str
    slide_count: int
    slides: list[SlidePreview]


class ReviewWarning(CamelModel):
    slide_id: int
    kind: str  # "red-flag", "improvement" or "missing"
    severity: str  # "low", "medium" or "high"
    title: str
    description: str
    suggestion: str | None = None


class DeckReview(CamelModel):
    score: int
    is_valid: bool
    warnings: list[ReviewWarning] = []
