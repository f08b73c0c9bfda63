from __future__ import annotations

import pytest

from pitchdeck.core.errors import DeckInputError, SessionStateError, SlideNotFoundError
from pitchdeck.core.session import PitchSession, SessionState
from pitchdeck.schemas.deck_content import SlideCategory, SlideStub


@pytest.mark.anyio
async def test_session_walks_the_happy_path(context, demo_gateway) -> None:
    session = PitchSession(context, demo_gateway, theme="minimal")
    assert session.state == SessionState.no_outline

    outline = await session.create_outline()
    assert session.state == SessionState.outline_ready
    assert outline.total_slides == 5

    deck = await session.build_deck(pacing_seconds=0)
    assert session.state == SessionState.deck_ready
    assert deck.theme == "minimal"

    revised = await session.revise(2, "make it more compelling")
    assert session.state == SessionState.deck_ready
    assert revised.slides[1].title.endswith("- Enhanced")

    await session.revise_all("make it better")
    assert len(session.deck.slides) == 5

    html = session.export_html()
    assert session.state == SessionState.exported
    assert 'data-theme="minimal"' in html
    # Exporting is a read; the deck is unchanged and can be exported again.
    assert session.export_html("vibrant") != html


@pytest.mark.anyio
async def test_out_of_order_calls_are_rejected(context, demo_gateway) -> None:
    session = PitchSession(context, demo_gateway)
    with pytest.raises(SessionStateError):
        await session.build_deck()
    with pytest.raises(SessionStateError):
        await session.revise(1, "x")
    with pytest.raises(SessionStateError):
        session.export_html()


@pytest.mark.anyio
async def test_edited_outline_is_renumbered(context, demo_gateway) -> None:
    session = PitchSession(context, demo_gateway)
    await session.create_outline()
    outline = session.edit_outline([
        SlideStub(id=9, title="Ask", category=SlideCategory.ask),
        SlideStub(id=3, title="Cover", category=SlideCategory.title),
    ])
    assert [s.id for s in outline.slides] == [1, 2]
    assert outline.total_slides == 2

    deck = await session.build_deck(pacing_seconds=0)
    assert [s.category for s in deck.slides] == [SlideCategory.ask, SlideCategory.title]


@pytest.mark.anyio
async def test_failed_revision_returns_session_to_deck_ready(context, demo_gateway) -> None:
    session = PitchSession(context, demo_gateway)
    await session.create_outline()
    await session.build_deck(pacing_seconds=0)
    with pytest.raises(SlideNotFoundError):
        await session.revise(99, "x")
    assert session.state == SessionState.deck_ready


@pytest.mark.anyio
async def test_empty_edited_outline_is_bad_input(context, demo_gateway) -> None:
    session = PitchSession(context, demo_gateway)
    await session.create_outline()
    with pytest.raises(DeckInputError):
        session.edit_outline([])
    assert session.state == SessionState.outline_ready
