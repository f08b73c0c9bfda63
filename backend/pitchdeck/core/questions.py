"""Guided questions: draft investor Q&A from a raw startup description."""

from __future__ import annotations

import logging

from pitchdeck.core.errors import DeckInputError
from pitchdeck.core.gateway import TextGateway
from pitchdeck.core.json_extract import decode_list
from pitchdeck.core.prompts import build_questions_prompt
from pitchdeck.schemas.deck_content import GuidedQuestion

logger = logging.getLogger(__name__)

QUESTIONS_MAX_OUTPUT = 2000


def _mentions(text: str, *words: str) -> bool:
    return any(w in text for w in words)


def fallback_questions(description: str) -> list[GuidedQuestion]:
    """Keyword-themed questions used when the upstream reply is unusable."""
    text = description.lower()
    is_ai = _mentions(text, "ai", "artificial intelligence", "machine learning")
    is_tech = _mentions(text, "tech", "software", "app", "platform")
    is_ecommerce = _mentions(text, "ecommerce", "e-commerce", "marketplace", "retail")
    is_b2b = _mentions(text, "b2b", "business", "enterprise", "companies")

    if is_ai:
        problem = "manual processes that could be automated with AI"
        solution = "AI-powered automation platform"
        market = "rapidly expanding AI market"
    elif is_tech:
        problem = "outdated technology solutions"
        solution = "modern software platform"
        market = "digital transformation market"
    elif is_ecommerce:
        problem = "fragmented online shopping experience"
        solution = "streamlined e-commerce platform"
        market = "growing online retail market"
    else:
        problem = "inefficiencies in the current market"
        solution = "innovative technology platform"
        market = "growing digital market"

    audience = "businesses and enterprises" if is_b2b else "consumers and end-users"
    revenue = (
        "subscription-based recurring revenue from business clients"
        if is_b2b
        else "a combination of subscription fees, transaction fees, and premium features"
    )

    return [
        GuidedQuestion(
            id="problem",
            question="What specific problem does your startup solve?",
            ai_answer=(
                f"Based on your description, your startup addresses {problem} by providing "
                f"a more efficient and effective solution. This problem affects many {audience} "
                "who currently struggle with existing alternatives, creating a significant "
                "market opportunity."
            ),
        ),
        GuidedQuestion(
            id="solution",
            question="How does your solution uniquely solve this problem?",
            ai_answer=(
                f"Your startup offers a {solution} that directly addresses these pain points "
                "through innovative features and superior user experience. The unique approach "
                "differentiates you from competitors and provides clear value to your target market."
            ),
        ),
        GuidedQuestion(
            id="market",
            question="Who is your target market and how large is it?",
            ai_answer=(
                f"Your primary target market consists of {audience} operating in the {market}. "
                "This represents a substantial addressable market with strong growth potential, "
                "driven by increasing demand for better solutions in this space."
            ),
        ),
        GuidedQuestion(
            id="business-model",
            question="How will you make money?",
            ai_answer=(
                f"Your revenue model is built around {revenue}, providing predictable income "
                "streams while scaling efficiently with customer growth."
            ),
        ),
        GuidedQuestion(
            id="ask",
            question="What are you asking for from investors?",
            ai_answer=(
                "You are seeking funding to accelerate product development, expand market reach, "
                "and scale operations. The investment will primarily go toward enhancing your "
                "technology platform, growing the team, and executing go-to-market strategies "
                "to capture market share."
            ),
        ),
    ]


async def generate_guided_questions(description: str, gateway: TextGateway) -> list[GuidedQuestion]:
    """Return five investor questions with drafted answers for *description*."""
    description = (description or "").strip()
    if not description:
        raise DeckInputError("Startup description is required")

    response = await gateway.invoke(build_questions_prompt(description), QUESTIONS_MAX_OUTPUT)
    questions = decode_list(response, GuidedQuestion, what="guided questions")
    if not questions:
        logger.warning("Falling back to keyword-based guided questions")
        return fallback_questions(description)
    return questions
