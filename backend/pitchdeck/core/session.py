"""
Per-session driver for the generation pipeline.

Tracks the session state machine::

    no-outline -> outline-ready -> deck-ready -> (revising <-> deck-ready) -> exported

and refuses operations called out of order.  The session owns its deck; the
pipeline functions it calls hold no reference to it.
"""

from __future__ import annotations

import logging
from enum import Enum

from pitchdeck.core.assembler import assemble_deck
from pitchdeck.core.deck_template import render_deck_html
from pitchdeck.core.errors import DeckInputError, SessionStateError
from pitchdeck.core.gateway import TextGateway
from pitchdeck.core.outline import generate_outline
from pitchdeck.core.revision import revise_deck_slide, revise_deck_wide
from pitchdeck.core.themes import lookup_theme
from pitchdeck.schemas.deck_content import (
    GeneratedDeck,
    PitchDeckOutline,
    SlideStub,
    StartupContext,
)

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    no_outline = "no-outline"
    outline_ready = "outline-ready"
    deck_ready = "deck-ready"
    revising = "revising"
    exported = "exported"


class PitchSession:
    def __init__(self, context: StartupContext, gateway: TextGateway, theme: str | None = None):
        self.context = context
        self.gateway = gateway
        self.theme = theme
        self.state = SessionState.no_outline
        self.outline: PitchDeckOutline | None = None
        self.deck: GeneratedDeck | None = None

    def _require(self, *allowed: SessionState) -> None:
        if self.state not in allowed:
            raise SessionStateError(
                f"Operation not allowed in state '{self.state.value}'"
            )

    async def create_outline(self) -> PitchDeckOutline:
        """Generate (or regenerate) the outline, replacing any previous one wholesale."""
        self._require(SessionState.no_outline, SessionState.outline_ready)
        self.outline = await generate_outline(self.context, self.gateway)
        self.state = SessionState.outline_ready
        return self.outline

    def edit_outline(self, stubs: list[SlideStub]) -> PitchDeckOutline:
        """Replace the outline with caller-edited stubs, renumbered ``1..n``."""
        self._require(SessionState.outline_ready)
        if not stubs:
            raise DeckInputError("An outline needs at least one slide")
        renumbered = [s.model_copy(update={"id": i}) for i, s in enumerate(stubs, start=1)]
        self.outline = PitchDeckOutline(slides=renumbered, total_slides=len(renumbered))
        return self.outline

    async def build_deck(self, pacing_seconds: float | None = None) -> GeneratedDeck:
        self._require(SessionState.outline_ready)
        self.deck = await assemble_deck(
            self.context,
            self.gateway,
            outline=self.outline,
            theme=self.theme,
            pacing_seconds=pacing_seconds,
        )
        self.state = SessionState.deck_ready
        return self.deck

    async def revise(self, slide_id: int, instruction: str) -> GeneratedDeck:
        self._require(SessionState.deck_ready)
        self.state = SessionState.revising
        try:
            self.deck = await revise_deck_slide(self.deck, slide_id, instruction, self.gateway)
        finally:
            self.state = SessionState.deck_ready
        return self.deck

    async def revise_all(self, instruction: str) -> GeneratedDeck:
        self._require(SessionState.deck_ready)
        self.state = SessionState.revising
        try:
            slides = await revise_deck_wide(self.deck, instruction, self.gateway)
            self.deck = self.deck.model_copy(update={"slides": slides})
        finally:
            self.state = SessionState.deck_ready
        return self.deck

    def export_html(self, theme_id: str | None = None) -> str:
        """Render the deck; exporting does not modify it."""
        self._require(SessionState.deck_ready, SessionState.exported)
        html = render_deck_html(self.deck, lookup_theme(theme_id or self.deck.theme))
        self.state = SessionState.exported
        logger.info("Exported deck %s", self.deck.id)
        return html
