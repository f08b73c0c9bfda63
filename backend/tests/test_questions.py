from __future__ import annotations

import json

import pytest

from pitchdeck.core.errors import DeckInputError
from pitchdeck.core.questions import fallback_questions, generate_guided_questions

_IDS = ["problem", "solution", "market", "business-model", "ask"]


@pytest.mark.anyio
async def test_questions_come_from_model_reply(scripted_gateway) -> None:
    reply = "Here:\n" + json.dumps([
        {"id": i, "question": f"Q {i}?", "aiAnswer": f"A {i}."} for i in _IDS
    ])
    questions = await generate_guided_questions("Dental booking app", scripted_gateway(lambda p: reply))
    assert [q.id for q in questions] == _IDS
    assert questions[0].ai_answer == "A problem."


@pytest.mark.anyio
async def test_questions_fall_back_to_keyword_answers(demo_gateway) -> None:
    questions = await generate_guided_questions("An AI platform for enterprise dentists", demo_gateway)
    assert [q.id for q in questions] == _IDS
    assert "AI" in questions[0].ai_answer
    assert "businesses and enterprises" in questions[0].ai_answer


@pytest.mark.anyio
async def test_blank_description_is_rejected(demo_gateway) -> None:
    with pytest.raises(DeckInputError):
        await generate_guided_questions("   ", demo_gateway)


def test_fallback_questions_default_theme() -> None:
    questions = fallback_questions("A bakery")
    assert len(questions) == 5
    assert "consumers and end-users" in questions[0].ai_answer
