"""
Deterministic HTML renderer for generated decks.

Takes a ``GeneratedDeck`` plus a ``ThemeDescriptor`` and produces a
self-contained, printable HTML document:
- One page per slide with a ``n / total`` counter
- Theme colours, fonts, radius and shadow applied through CSS variables
- Metrics grid, callout and "Key Takeaways" blocks when the slide has them
- Keyboard navigation (Arrow keys / Space) for on-screen presenting

All slide text is HTML-escaped.  ``build_preview`` produces the lightweight
summary the deck overview screen shows.
"""

from __future__ import annotations

import html as html_mod

from pitchdeck.schemas.deck_content import (
    DeckPreview,
    GeneratedDeck,
    SlideCategory,
    SlideContent,
    SlidePreview,
)
from pitchdeck.schemas.theme import ThemeDescriptor


def _e(text: str | None) -> str:
    """HTML-escape helper."""
    return html_mod.escape(text or "")


def _render_metrics(slide: SlideContent) -> str:
    if not slide.content.metrics:
        return ""
    cards = []
    for m in slide.content.metrics:
        context = f'<div class="metric-context">{_e(m.context)}</div>' if m.context else ""
        cards.append(
            f'<div class="metric"><div class="metric-value">{_e(m.value)}</div>'
            f'<div class="metric-label">{_e(m.label)}</div>{context}</div>'
        )
    return f'<div class="metrics">{"".join(cards)}</div>'


def _render_next_steps(slide: SlideContent) -> str:
    if not slide.content.next_steps:
        return ""
    items = "".join(f"<li>{_e(step)}</li>" for step in slide.content.next_steps)
    return f'<div class="next-steps"><h4>Key Takeaways</h4><ul>{items}</ul></div>'


def _render_cover(slide: SlideContent, number: int, total: int) -> str:
    body = slide.content
    sub = f'<p class="cover-subtitle">{_e(body.subheadline)}</p>' if body.subheadline else ""
    callout = f'<div class="callout">{_e(body.callout)}</div>' if body.callout else ""
    return f"""
    <section class="slide slide-cover" data-slide="{number - 1}">
      <div class="slide-number">{number} / {total}</div>
      <div class="slide-content cover-content">
        <h1 class="cover-title">{_e(body.headline)}</h1>
        {sub}
        {callout}
      </div>
    </section>"""


def _render_standard(slide: SlideContent, number: int, total: int) -> str:
    body = slide.content
    sub = f'<h2 class="slide-subtitle">{_e(body.subheadline)}</h2>' if body.subheadline else ""
    points = "".join(f"<li>{_e(p)}</li>" for p in body.bullets)
    callout = f'<div class="callout">{_e(body.callout)}</div>' if body.callout else ""
    return f"""
    <section class="slide slide-{_e(slide.category.value)}" data-slide="{number - 1}">
      <div class="slide-number">{number} / {total}</div>
      <div class="slide-content">
        <p class="slide-kicker">{_e(slide.title)}</p>
        <h1 class="slide-title">{_e(body.headline)}</h1>
        {sub}
        <ul class="bullets">{points}</ul>
        {_render_metrics(slide)}
        {callout}
        {_render_next_steps(slide)}
      </div>
    </section>"""


def _render_slide(slide: SlideContent, number: int, total: int) -> str:
    if slide.category == SlideCategory.title:
        return _render_cover(slide, number, total)
    return _render_standard(slide, number, total)


def render_deck_html(deck: GeneratedDeck, theme: ThemeDescriptor) -> str:
    """Render *deck* into a self-contained HTML presentation styled by *theme*."""
    total = len(deck.slides)
    slides_html = "".join(
        _render_slide(slide, i, total) for i, slide in enumerate(deck.slides, start=1)
    )
    c = theme.colors
    s = theme.styles
    gradient = s.gradient or c.primary

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{_e(deck.title)}</title>
<style>
:root {{
  --primary: {c.primary};
  --secondary: {c.secondary};
  --accent: {c.accent};
  --text: {c.text};
  --background: {c.background};
  --surface: {c.surface};
  --radius: {s.border_radius};
  --shadow: {s.shadow};
  --gradient: {gradient};
  --font-heading: {theme.fonts.heading};
  --font-body: {theme.fonts.body};
}}
*, *::before, *::after {{ box-sizing: border-box; margin: 0; padding: 0; }}
body {{
  font-family: var(--font-body);
  background: var(--background);
  color: var(--text);
  line-height: 1.6;
}}
.deck {{ max-width: 1200px; margin: 0 auto; padding: 2rem; }}
.slide {{
  position: relative;
  background: var(--surface);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
  padding: 3rem;
  margin-bottom: 2rem;
  min-height: 600px;
  display: flex; flex-direction: column; justify-content: center;
  page-break-after: always;
}}
.slide-number {{
  position: absolute; top: 1.5rem; right: 1.5rem;
  background: var(--primary); color: #fff;
  padding: 0.4rem 0.9rem;
  border-radius: var(--radius);
  font-weight: 600; font-size: 0.85rem;
}}
.slide-kicker {{
  text-transform: uppercase; letter-spacing: 0.12em;
  font-size: 0.8rem; font-weight: 600;
  color: var(--accent);
  margin-bottom: 0.5rem;
}}
.slide-title, .cover-title {{
  font-family: var(--font-heading);
  font-size: 2.5rem; font-weight: 700; line-height: 1.2;
  color: var(--primary);
  margin-bottom: 1rem;
}}
.cover-content {{ text-align: center; }}
.cover-title {{
  font-size: 3.5rem;
  background: var(--gradient);
  -webkit-background-clip: text; -webkit-text-fill-color: transparent;
  background-clip: text;
}}
.slide-subtitle, .cover-subtitle {{
  font-size: 1.25rem; font-weight: 500;
  color: var(--secondary);
  margin-bottom: 2rem;
}}
.bullets {{ list-style: none; margin-bottom: 2rem; }}
.bullets li {{
  position: relative;
  padding: 0.75rem 0 0.75rem 2rem;
  font-size: 1.1rem;
}}
.bullets li::before {{
  content: "\\25B6";
  position: absolute; left: 0;
  color: var(--accent);
}}
.metrics {{
  display: grid;
  grid-template-columns: repeat(auto-fit, minmax(200px, 1fr));
  gap: 1.5rem; margin: 2rem 0;
}}
.metric {{
  background: var(--background);
  padding: 1.5rem;
  border-radius: var(--radius);
  border-left: 4px solid var(--accent);
  text-align: center;
}}
.metric-value {{ font-size: 2rem; font-weight: 700; color: var(--primary); }}
.metric-label {{ font-size: 0.9rem; font-weight: 500; color: var(--secondary); }}
.metric-context {{ font-size: 0.8rem; opacity: 0.7; }}
.callout {{
  background: var(--primary); color: #fff;
  padding: 1.5rem; margin: 2rem 0;
  border-radius: var(--radius);
  font-size: 1.1rem; font-weight: 500; text-align: center;
}}
.next-steps {{
  padding: 1.5rem; margin-top: 2rem;
  border: 1px solid var(--accent);
  border-radius: var(--radius);
}}
.next-steps h4 {{ color: var(--primary); margin-bottom: 1rem; }}
.next-steps ul {{ list-style: none; }}
.next-steps li {{ position: relative; padding: 0.5rem 0 0.5rem 1.5rem; }}
.next-steps li::before {{
  content: "\\2713";
  position: absolute; left: 0;
  color: var(--accent); font-weight: bold;
}}
.slide.focus {{ outline: 3px solid var(--accent); }}
@media print {{
  .deck {{ padding: 0; }}
  .slide {{ margin-bottom: 0; box-shadow: none; border: 1px solid #ddd; }}
}}
@media (max-width: 768px) {{
  .slide {{ padding: 2rem; margin-bottom: 1rem; }}
  .slide-title {{ font-size: 2rem; }}
  .metrics {{ grid-template-columns: 1fr; }}
}}
</style>
</head>
<body>
<div class="deck" data-theme="{_e(theme.id)}">
  {slides_html}
</div>

<script>
(function() {{
  const TOTAL = {total};
  let current = 0;
  const slides = document.querySelectorAll('.slide');

  function goTo(n) {{
    if (n < 0 || n >= TOTAL) return;
    slides[current].classList.remove('focus');
    current = n;
    slides[current].classList.add('focus');
    slides[current].scrollIntoView({{ behavior: 'smooth' }});
  }}

  document.addEventListener('keydown', function(e) {{
    if (e.key === 'ArrowRight' || e.key === ' ') {{ e.preventDefault(); goTo(current + 1); }}
    if (e.key === 'ArrowLeft') {{ e.preventDefault(); goTo(current - 1); }}
  }});
}})();
</script>
</body>
</html>"""


def build_preview(deck: GeneratedDeck) -> DeckPreview:
    return DeckPreview(
        id=deck.id,
        title=deck.title,
        theme=deck.theme,
        slide_count=len(deck.slides),
        slides=[
            SlidePreview(
                id=slide.id,
                number=i,
                title=slide.title,
                category=slide.category,
                summary=slide.content.headline,
                has_metrics=bool(slide.content.metrics),
                has_callout=bool(slide.content.callout),
            )
            for i, slide in enumerate(deck.slides, start=1)
        ],
    )
