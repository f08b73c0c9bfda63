from fastapi import HTTPException

from pitchdeck.core.deck_template import build_preview, render_deck_html
from pitchdeck.core.review import review_deck
from pitchdeck.core.themes import THEMES, list_themes, lookup_theme
from pitchdeck.schemas.deck_content import DeckPreview, DeckReview, GeneratedDeck
from pitchdeck.schemas.theme import ThemeDescriptor


def export_deck(deck: GeneratedDeck, theme_id: str | None = None) -> str:
    """Render the deck to HTML; unknown themes fall back to the default."""
    if not deck.slides:
        raise HTTPException(status_code=400, detail="Cannot export a deck with no slides.")
    return render_deck_html(deck, lookup_theme(theme_id or deck.theme))


def preview_deck(deck: GeneratedDeck) -> DeckPreview:
    return build_preview(deck)


def review(deck: GeneratedDeck) -> DeckReview:
    return review_deck(deck)


def get_themes() -> list[ThemeDescriptor]:
    return list_themes()


def get_theme(theme_id: str) -> ThemeDescriptor:
    # The lookup itself is total; the endpoint reports unknown ids explicitly.
    theme = THEMES.get(theme_id)
    if theme is None:
        raise HTTPException(status_code=404, detail=f"Theme '{theme_id}' not found")
    return theme
