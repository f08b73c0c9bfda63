from __future__ import annotations

import asyncio
import json

import pytest

from pitchdeck.core import assembler
from pitchdeck.core.assembler import assemble_deck, deck_title
from pitchdeck.core.expander import fallback_slide
from pitchdeck.core.outline import default_outline, generate_outline
from pitchdeck.schemas.deck_content import SlideCategory, StartupContext


@pytest.mark.anyio
async def test_dentist_deck_matches_outline(context, demo_gateway) -> None:
    outline = await generate_outline(context, demo_gateway)
    deck = await assemble_deck(context, demo_gateway, outline=outline, pacing_seconds=0)

    assert len(deck.slides) == 5
    assert [s.id for s in deck.slides] == [s.id for s in outline.slides]
    assert [s.category for s in deck.slides] == [s.category for s in outline.slides]
    assert all(s.content.headline and s.content.bullets for s in deck.slides)
    assert deck.theme == "modern"
    assert deck.title == "Healthcare Pitch Deck"
    assert deck.id.startswith("deck_")


@pytest.mark.anyio
async def test_total_upstream_failure_still_yields_full_deck(context, failing_gateway) -> None:
    deck = await assemble_deck(context, failing_gateway, pacing_seconds=0)
    assert len(deck.slides) == context.slide_count
    assert all(s.content.headline and s.content.bullets for s in deck.slides)


@pytest.mark.anyio
async def test_unusable_replies_use_local_fallbacks(context, garbage_gateway) -> None:
    deck = await assemble_deck(context, garbage_gateway, pacing_seconds=0)
    outline = default_outline(context.slide_count)
    assert deck.slides == [fallback_slide(stub, context) for stub in outline.slides]


@pytest.mark.anyio
async def test_each_slide_sees_only_earlier_slides(context, scripted_gateway) -> None:
    def reply(prompt: str) -> str:
        if "outline" in prompt:
            return json.dumps({"slides": [
                {"title": "One", "type": "title"},
                {"title": "Two", "type": "problem"},
                {"title": "Three", "type": "solution"},
            ]})
        title = prompt.split("Slide: ", 1)[1].split(" (Type", 1)[0]
        return json.dumps({"content": {"headline": f"Headline {title}", "bullets": ["x"]}})

    gateway = scripted_gateway(reply)
    await assemble_deck(context, gateway, pacing_seconds=0)

    expansions = gateway.prompts[1:]
    assert "Headline One" not in expansions[0]
    assert "One: Headline One" in expansions[1]
    assert "Two: Headline Two" not in expansions[1]
    assert "One: Headline One" in expansions[2] and "Two: Headline Two" in expansions[2]


@pytest.mark.anyio
async def test_pacing_delay_runs_between_expansions_only(context, demo_gateway, monkeypatch) -> None:
    delays: list[float] = []
    real_sleep = asyncio.sleep

    async def fake_sleep(seconds: float, *args, **kwargs):
        delays.append(seconds)
        return await real_sleep(0)

    monkeypatch.setattr(assembler.asyncio, "sleep", fake_sleep)
    await assemble_deck(context, demo_gateway, pacing_seconds=0.25)
    assert [d for d in delays if d == 0.25] == [0.25] * (context.slide_count - 1)


@pytest.mark.anyio
async def test_theme_override_is_bound_to_deck(context, demo_gateway) -> None:
    deck = await assemble_deck(context, demo_gateway, theme="minimal", pacing_seconds=0)
    assert deck.theme == "minimal"


@pytest.mark.anyio
async def test_qa_stub_in_outline_is_not_generated(context, scripted_gateway) -> None:
    outline = default_outline(11)
    gateway = scripted_gateway(lambda p: "nothing useful")
    deck = await assemble_deck(context, gateway, outline=outline, pacing_seconds=0)
    assert deck.slides[-1].category == SlideCategory.qa_chat
    assert len(gateway.prompts) == 10


def test_deck_title_prefers_company_name() -> None:
    assert deck_title(StartupContext(topic="x", company_name="ChairTime", industry="Health")) == (
        "ChairTime Pitch Deck"
    )
    assert deck_title(StartupContext(topic="x", industry="Health")) == "Health Pitch Deck"
    assert deck_title(StartupContext(topic="x")) == "Pitch Deck"
