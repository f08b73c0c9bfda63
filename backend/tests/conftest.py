from __future__ import annotations

from collections.abc import Callable

import pytest
from pydantic_ai.messages import ModelMessage, ModelResponse, TextPart
from pydantic_ai.models.function import AgentInfo, FunctionModel

from pitchdeck.core.gateway import TextGateway
from pitchdeck.schemas.deck_content import (
    GeneratedDeck,
    Metric,
    SlideBody,
    SlideCategory,
    SlideContent,
    StartupContext,
)


class ScriptedGateway(TextGateway):
    """Gateway backed by a FunctionModel; records every prompt it is sent."""

    def __init__(self, reply: Callable[[str], str]):
        self.prompts: list[str] = []

        def respond(messages: list[ModelMessage], info: AgentInfo) -> ModelResponse:
            prompt = messages[-1].parts[-1].content
            self.prompts.append(prompt)
            return ModelResponse(parts=[TextPart(reply(prompt))])

        super().__init__(model=FunctionModel(respond))


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def context() -> StartupContext:
    return StartupContext(
        topic="AI scheduling assistant for dentists",
        industry="Healthcare",
        audience="investors",
        slide_count=5,
    )


@pytest.fixture
def demo_gateway() -> TextGateway:
    return TextGateway(api_key="")


@pytest.fixture
def scripted_gateway() -> Callable[[Callable[[str], str]], ScriptedGateway]:
    return ScriptedGateway


@pytest.fixture
def garbage_gateway() -> ScriptedGateway:
    """Answers every prompt with text that holds no JSON at all."""
    return ScriptedGateway(lambda prompt: "Sorry, I cannot help with that.")


@pytest.fixture
def failing_gateway() -> ScriptedGateway:
    def boom(prompt: str) -> str:
        raise RuntimeError("upstream unavailable")

    return ScriptedGateway(boom)


@pytest.fixture
def market_slide() -> SlideContent:
    return SlideContent(
        id=4,
        title="Market Opportunity",
        category=SlideCategory.market,
        content=SlideBody(
            headline="A $4B scheduling market inside dental practices",
            bullets=["186,000 US dental practices", "Most still book by phone"],
            metrics=[Metric(label="TAM", value="$4B", context="US dental admin software")],
            callout="Every missed appointment costs a practice $200",
        ),
    )


@pytest.fixture
def deck(context: StartupContext, market_slide: SlideContent) -> GeneratedDeck:
    title = SlideContent(
        id=1,
        title="Company Overview",
        category=SlideCategory.title,
        content=SlideBody(
            headline="ChairTime",
            subheadline="The front desk that never sleeps",
            bullets=["AI booking for dental practices"],
        ),
    )
    problem = SlideContent(
        id=2,
        title="The Problem",
        category=SlideCategory.problem,
        content=SlideBody(
            headline="Front desks lose 20% of calls",
            bullets=["Patients call after hours", "Staff juggle phones and check-ins"],
        ),
    )
    return GeneratedDeck(
        id="deck_test",
        title="Healthcare Pitch Deck",
        created_at="2026-01-01T00:00:00Z",
        slides=[title, problem, market_slide],
        context=context,
    )
