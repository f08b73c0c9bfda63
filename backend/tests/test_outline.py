from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from pitchdeck.core.outline import default_outline, generate_outline, normalise_outline
from pitchdeck.core.prompts import build_outline_prompt
from pitchdeck.schemas.deck_content import PitchDeckOutline, SlideCategory, StartupContext


def _assert_contiguous(outline) -> None:
    assert outline.total_slides == len(outline.slides)
    assert [s.id for s in outline.slides] == list(range(1, len(outline.slides) + 1))


@pytest.mark.anyio
async def test_outline_for_dentist_scenario_has_requested_count(context, demo_gateway) -> None:
    outline = await generate_outline(context, demo_gateway)
    assert outline.total_slides == 5
    _assert_contiguous(outline)
    assert all(isinstance(s.category, SlideCategory) for s in outline.slides)


@pytest.mark.anyio
async def test_outline_prompt_carries_context(context, scripted_gateway) -> None:
    reply = json.dumps({"slides": [{"title": "Hook", "type": "title"}]})
    gateway = scripted_gateway(lambda prompt: reply)
    await generate_outline(context, gateway)
    prompt = gateway.prompts[0]
    assert "AI scheduling assistant for dentists" in prompt
    assert "Healthcare" in prompt
    assert "5-slide" in prompt


@pytest.mark.anyio
async def test_outline_is_renumbered_and_unknown_types_coerced(context, scripted_gateway) -> None:
    reply = "Sure!\n" + json.dumps({"slides": [
        {"id": 7, "title": "Welcome", "type": "title"},
        {"id": 7, "title": "Why now", "type": "timing"},
        {"id": 3, "title": "Model", "type": "business_model"},
    ]})
    outline = await generate_outline(context, scripted_gateway(lambda prompt: reply))
    _assert_contiguous(outline)
    assert [s.category for s in outline.slides] == [
        SlideCategory.title,
        SlideCategory.appendix,
        SlideCategory.business_model,
    ]


@pytest.mark.anyio
async def test_unusable_outline_falls_back_to_default(context, garbage_gateway) -> None:
    outline = await generate_outline(context, garbage_gateway)
    assert outline == default_outline(5)
    assert outline.slides[0].category == SlideCategory.title


@pytest.mark.anyio
async def test_empty_outline_falls_back_to_default(context, scripted_gateway) -> None:
    outline = await generate_outline(context, scripted_gateway(lambda prompt: '{"slides": []}'))
    assert outline == default_outline(5)


def test_default_outline_ends_with_qa_when_not_truncated() -> None:
    outline = default_outline(20)
    assert outline.total_slides == 11
    assert outline.slides[-1].category == SlideCategory.qa_chat
    _assert_contiguous(outline)


def test_default_outline_truncates_to_requested_count() -> None:
    assert default_outline(3).total_slides == 3


def test_normalise_outline_rejects_blank_titles() -> None:
    assert normalise_outline({"slides": [{"title": "  ", "type": "title"}]}, 5) is None


def test_existing_content_is_enhanced_not_replaced() -> None:
    ctx = StartupContext(topic="Dental AI", existing_content="Our old deck: we book patients.")
    assert "Our old deck: we book patients." in build_outline_prompt(ctx)


def test_outline_rejects_duplicate_ids() -> None:
    with pytest.raises(ValidationError):
        PitchDeckOutline.model_validate({"slides": [
            {"id": 1, "title": "Company Overview", "type": "title"},
            {"id": 1, "title": "The Problem", "type": "problem"},
        ]})


def test_outline_total_follows_slide_list() -> None:
    outline = PitchDeckOutline.model_validate({
        "slides": [{"id": 1, "title": "Company Overview", "type": "title"}],
        "totalSlides": 7,
    })
    assert outline.total_slides == 1
