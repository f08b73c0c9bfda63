"""
Caller-misuse errors raised by the generation pipeline.

Upstream failures and malformed model output never surface as exceptions;
they are absorbed by the gateway and the per-component fallbacks.  Only the
errors below reach the caller, because no sensible fallback content exists
for them.
"""


class PitchDeckError(Exception):
    """Base class for every error the pipeline reports to its caller."""


class DeckInputError(PitchDeckError, ValueError):
    """The caller supplied unusable input (blank description, blank instruction, ...)."""


class SlideNotFoundError(PitchDeckError, LookupError):
    """A revision targeted a slide id that does not exist in the deck."""

    def __init__(self, slide_id: int):
        self.slide_id = slide_id
        super().__init__(f"Slide {slide_id} does not exist in this deck")


class SessionStateError(PitchDeckError):
    """A session operation was called out of order (e.g. revise before assembling)."""
