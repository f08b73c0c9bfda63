from __future__ import annotations

import json

import pytest

from pitchdeck.core.errors import DeckInputError, SlideNotFoundError
from pitchdeck.core.revision import (
    revise_deck_slide,
    revise_deck_wide,
    revise_field,
    revise_slide,
    suggest_improvement,
)
from pitchdeck.schemas.deck_content import SlideCategory

_REVISED = json.dumps({
    "id": 42,
    "title": "A Sharper Market Slide",
    "type": "team",
    "content": {
        "headline": "$4B spent on dental front desks every year",
        "bullets": ["186K practices", "Phone booking dominates"],
        "metrics": [{"label": "TAM", "value": "$4B"}],
        "callout": "Scheduling is the wedge",
    },
})


@pytest.mark.anyio
async def test_revise_field_returns_improved_title_and_content(context, scripted_gateway) -> None:
    reply = '{"improvedTitle": "Why Now", "improvedContent": "Dental staffing shortage"}'
    result = await revise_field(
        "Timing", "Staff are scarce", SlideCategory.problem, "make it punchier",
        context, scripted_gateway(lambda p: reply),
    )
    assert (result.title, result.content) == ("Why Now", "Dental staffing shortage")


@pytest.mark.anyio
async def test_revise_field_fallback_appends_instruction(context, demo_gateway) -> None:
    result = await revise_field(
        "Timing", "Staff are scarce", SlideCategory.problem, "make it punchier", context, demo_gateway,
    )
    assert result.title == "Timing"
    assert result.content == "Staff are scarce (Enhanced based on your request: make it punchier)"


@pytest.mark.anyio
async def test_blank_instruction_is_caller_misuse(context, market_slide, demo_gateway) -> None:
    with pytest.raises(DeckInputError):
        await revise_slide(market_slide, "   ", context, demo_gateway)
    with pytest.raises(DeckInputError):
        await revise_field("T", "C", SlideCategory.market, "", context, demo_gateway)


@pytest.mark.anyio
async def test_revise_slide_keeps_id_and_category(context, market_slide, scripted_gateway) -> None:
    gateway = scripted_gateway(lambda p: _REVISED)
    revised = await revise_slide(market_slide, "add numbers", context, gateway)
    assert (revised.id, revised.category) == (4, SlideCategory.market)
    assert revised.title == "A Sharper Market Slide"
    assert revised.content.headline.startswith("$4B")
    # Market slides get the extra sizing guidance.
    assert "(TAM, SAM, SOM)" in gateway.prompts[0]


@pytest.mark.anyio
async def test_revise_slide_fallback_is_visible(context, market_slide, garbage_gateway) -> None:
    revised = await revise_slide(market_slide, "add numbers", context, garbage_gateway)
    assert revised.id == market_slide.id
    assert revised.title == "Market Opportunity (Enhanced)"
    assert revised.content.headline.endswith("(Improved based on: add numbers)")
    assert revised.content.bullets == market_slide.content.bullets


@pytest.mark.anyio
async def test_revise_slide_in_demo_mode_is_schema_valid(context, market_slide, demo_gateway) -> None:
    revised = await revise_slide(market_slide, "make it more compelling", context, demo_gateway)
    assert revised.title == "Market Opportunity - Enhanced"
    assert revised.category == SlideCategory.market
    assert revised.content.bullets


@pytest.mark.anyio
async def test_deck_wide_revision_preserves_count_and_order(deck, scripted_gateway) -> None:
    gateway = scripted_gateway(lambda p: _REVISED)
    slides = await revise_deck_wide(deck, "use a bolder tone", gateway)
    assert [s.id for s in slides] == [s.id for s in deck.slides]
    assert [s.category for s in slides] == [s.category for s in deck.slides]
    assert len(gateway.prompts) == len(deck.slides)
    assert all(p.startswith("\nImprove this entire slide") for p in gateway.prompts)
    assert all("DECK-WIDE IMPROVEMENT: use a bolder tone" in p for p in gateway.prompts)


@pytest.mark.anyio
async def test_deck_wide_revision_falls_back_per_slide(deck, scripted_gateway) -> None:
    replies = iter([_REVISED, "garbage", _REVISED])
    slides = await revise_deck_wide(deck, "tighten", scripted_gateway(lambda p: next(replies)))
    assert slides[0].title == "A Sharper Market Slide"
    assert slides[1].title == "The Problem (Enhanced)"
    assert slides[2].title == "A Sharper Market Slide"


@pytest.mark.anyio
async def test_revise_deck_slide_replaces_only_target(deck, scripted_gateway) -> None:
    updated = await revise_deck_slide(deck, 2, "tighten", scripted_gateway(lambda p: _REVISED))
    assert updated.slides[0] == deck.slides[0]
    assert updated.slides[2] == deck.slides[2]
    assert updated.slides[1].id == 2
    assert updated.slides[1].category == SlideCategory.problem
    assert deck.slides[1].title == "The Problem"


@pytest.mark.anyio
async def test_revise_unknown_slide_raises(deck, demo_gateway) -> None:
    with pytest.raises(SlideNotFoundError) as exc:
        await revise_deck_slide(deck, 99, "tighten", demo_gateway)
    assert exc.value.slide_id == 99


@pytest.mark.anyio
async def test_suggestion_returns_model_text(context, scripted_gateway) -> None:
    gateway = scripted_gateway(lambda p: "  Quote your pilot's no-show reduction.  ")
    text = await suggest_improvement("We reduce no-shows", SlideCategory.traction, context, gateway)
    assert text == "Quote your pilot's no-show reduction."


@pytest.mark.anyio
async def test_suggestion_falls_back_on_demo_envelope(context, demo_gateway) -> None:
    text = await suggest_improvement("We reduce no-shows", SlideCategory.traction, context, demo_gateway)
    assert "traction" in text
    assert "Healthcare" in text


@pytest.mark.anyio
async def test_revision_survives_malformed_optional_field(context, market_slide, scripted_gateway) -> None:
    reply = json.dumps({
        "title": "A Sharper Market Slide",
        "content": {"headline": "$4B and growing", "bullets": ["186K practices"], "video": "none"},
    })
    revised = await revise_slide(market_slide, "add numbers", context, scripted_gateway(lambda p: reply))
    assert revised.title == "A Sharper Market Slide"
    assert revised.content.video is None


@pytest.mark.anyio
async def test_suggestion_ignores_canned_json_payloads(context, demo_gateway) -> None:
    text = await suggest_improvement(
        "Our outline covers the problem", SlideCategory.problem, context, demo_gateway
    )
    assert not text.lstrip().startswith("{")
    assert "problem slide" in text


@pytest.mark.anyio
async def test_blank_suggestion_content_is_caller_misuse(context, demo_gateway) -> None:
    with pytest.raises(DeckInputError):
        await suggest_improvement("   ", SlideCategory.problem, context, demo_gateway)
