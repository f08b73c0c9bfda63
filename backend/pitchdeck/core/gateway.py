"""
Generative text gateway.

Wraps a single pydantic-ai ``Agent`` that returns free text.  ``invoke`` never
raises: without a credential the gateway runs in demo mode, and any upstream
failure (network, quota, malformed reply) falls back to the deterministic
synthetic generator in ``pitchdeck.core.demo_content``.  There is exactly one
attempt per call; the OpenAI client is built with retries disabled.
"""

from __future__ import annotations

import logging

from openai import AsyncOpenAI
from pydantic_ai import Agent
from pydantic_ai.models import Model
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.openai import OpenAIProvider
from pydantic_ai.settings import ModelSettings

from pitchdeck.core.config import Settings
from pitchdeck.core.demo_content import generate_demo_content

logger = logging.getLogger(__name__)

DEMO_API_KEY = "demo_key_for_testing"

_SYSTEM_PROMPT = """\
You are an expert pitch deck consultant who has helped hundreds of startups \
raise funding.  You create compelling, investor-focused content that follows \
proven pitch deck best practices.
"""


class TextGateway:
    """Single entry point to the generative text service.

    Parameters
    ----------
    api_key:
        OpenAI API key.  Empty (or the demo key) selects demo mode unless an
        explicit *model* is given.
    model:
        Any pydantic-ai model.  Takes precedence over *api_key*; tests pass a
        ``FunctionModel`` here to script upstream replies.
    model_name:
        OpenAI model used when the gateway builds its own model from *api_key*.
    temperature:
        Sampling temperature forwarded with every request.
    """

    def __init__(
        self,
        api_key: str = "",
        model: Model | None = None,
        model_name: str = "gpt-4o",
        temperature: float = 0.7,
    ):
        if model is None and api_key and api_key != DEMO_API_KEY:
            client = AsyncOpenAI(api_key=api_key, max_retries=0)
            model = OpenAIChatModel(model_name, provider=OpenAIProvider(openai_client=client))

        self.temperature = temperature
        self._agent: Agent[None, str] | None = None
        if model is not None:
            self._agent = Agent(model=model, output_type=str, system_prompt=_SYSTEM_PROMPT)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TextGateway":
        return cls(
            api_key=settings.OPENAI_API_KEY,
            model_name=settings.OPENAI_MODEL,
            temperature=settings.GENERATION_TEMPERATURE,
        )

    @property
    def demo_mode(self) -> bool:
        return self._agent is None

    async def invoke(self, instruction: str, max_output_size: int = 2000) -> str:
        """Return raw text for *instruction*; never raises."""
        if self._agent is None:
            logger.info("Demo mode: using fallback content generation")
            return generate_demo_content(instruction)

        try:
            result = await self._agent.run(
                instruction,
                model_settings=ModelSettings(
                    max_tokens=max_output_size,
                    temperature=self.temperature,
                ),
            )
            return result.output or ""
        except Exception:
            logger.warning("Generative text call failed; using fallback content", exc_info=True)
            return generate_demo_content(instruction)
