"""
Content review for generated decks.

Flags the common pitch deck mistakes investors react to: red-flag claims,
buzzwords, generic language, and slides missing the data their category
calls for.  Pure and deterministic; no gateway calls.
"""

from __future__ import annotations

from pitchdeck.schemas.deck_content import (
    DeckReview,
    GeneratedDeck,
    ReviewWarning,
    SlideCategory,
    SlideContent,
)

RED_FLAG_PHRASES = [
    "everyone", "all businesses", "huge market", "no competition",
    "first mover", "viral marketing", "build it and they will come",
    "just need", "conservative estimate", "billion dollar market",
]

GENERIC_PHRASES = [
    "experienced team", "passionate", "innovative", "revolutionary",
    "game-changing", "disruptive", "cutting-edge", "world-class",
]

BUZZWORDS = [
    "ai-powered", "blockchain", "machine learning", "deep learning",
    "big data", "iot", "cloud-native", "next-generation",
]

_PENALTY = {"high": 15, "medium": 8, "low": 3}

_METRIC_CATEGORIES = {SlideCategory.market, SlideCategory.traction, SlideCategory.financials}


def _slide_text(slide: SlideContent) -> str:
    body = slide.content
    parts = [slide.title, body.headline, body.subheadline or "", body.callout or ""]
    parts.extend(body.bullets)
    parts.extend(body.next_steps or [])
    return " ".join(parts).lower()


def _found(text: str, phrases: list[str]) -> list[str]:
    return [p for p in phrases if p in text]


def review_slide(slide: SlideContent) -> list[ReviewWarning]:
    # The Q&A slide is hand-authored placeholder text.
    if slide.category == SlideCategory.qa_chat:
        return []

    text = _slide_text(slide)
    warnings: list[ReviewWarning] = []

    red_flags = _found(text, RED_FLAG_PHRASES)
    if red_flags:
        warnings.append(ReviewWarning(
            slide_id=slide.id,
            kind="red-flag",
            severity="high",
            title="Red-flag claims",
            description=f"Investors discount claims like: {', '.join(red_flags)}",
            suggestion="Replace sweeping claims with a specific, sourced figure",
        ))

    buzzwords = _found(text, BUZZWORDS)
    if buzzwords:
        warnings.append(ReviewWarning(
            slide_id=slide.id,
            kind="red-flag",
            severity="medium",
            title="Buzzword alert",
            description=f"Slide leans on buzzwords: {', '.join(buzzwords)}",
            suggestion="Replace with specific, concrete benefits your product provides",
        ))

    generic = _found(text, GENERIC_PHRASES)
    if generic:
        warnings.append(ReviewWarning(
            slide_id=slide.id,
            kind="improvement",
            severity="low",
            title="Generic language",
            description=f"Replace generic phrases with specific details: {', '.join(generic)}",
            suggestion="Use concrete examples and specific pain points instead",
        ))

    if slide.category in _METRIC_CATEGORIES and not slide.content.metrics:
        warnings.append(ReviewWarning(
            slide_id=slide.id,
            kind="missing",
            severity="medium",
            title="No supporting data",
            description=f"A {slide.category.value} slide should carry at least one metric",
            suggestion="Add a metric with a label, a value and its source or context",
        ))

    if slide.category == SlideCategory.ask and "$" not in text and not slide.content.metrics:
        warnings.append(ReviewWarning(
            slide_id=slide.id,
            kind="missing",
            severity="high",
            title="No funding amount",
            description="The ask slide does not state how much you are raising",
            suggestion="State the amount and break down the use of funds",
        ))

    return warnings


def review_deck(deck: GeneratedDeck) -> DeckReview:
    """Score *deck* from 0 to 100; a deck scoring 70 or more is considered valid."""
    warnings = [w for slide in deck.slides for w in review_slide(slide)]
    score = max(0, 100 - sum(_PENALTY[w.severity] for w in warnings))
    return DeckReview(score=score, is_valid=score >= 70, warnings=warnings)
