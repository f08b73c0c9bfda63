"""
Instruction builders for every call the pipeline makes to the gateway.

The wording doubles as the routing key for demo mode: outline instructions
mention "outline", expansion instructions mention "slide content", whole-slide
revisions open with "Improve this entire slide", and deck-wide revisions are
framed with "DECK-WIDE IMPROVEMENT".  Keep those phrases where they are.
"""

from __future__ import annotations

import json

from pitchdeck.schemas.deck_content import (
    SlideCategory,
    SlideContent,
    SlideStub,
    StartupContext,
)


# ---------------------------------------------------------------------------
# Category guidance
# ---------------------------------------------------------------------------

CATEGORY_GUIDANCE: dict[SlideCategory, str] = {
    SlideCategory.title: "Company name, tagline, funding ask",
    SlideCategory.problem: "Specific pain points, market stats, urgency",
    SlideCategory.solution: "Unique value prop, key features, differentiation",
    SlideCategory.market: (
        "TAM/SAM/SOM with market size figures, customer segmentation, "
        "growth trends, opportunity size"
    ),
    SlideCategory.product: "Demo screenshots, features, user benefits",
    SlideCategory.traction: "Revenue, users, partnerships, growth metrics",
    SlideCategory.business_model: "Revenue streams, unit economics, scalability",
    SlideCategory.team: "Key members, experience, advisors",
    SlideCategory.financials: "Projections, key metrics, assumptions",
    SlideCategory.ask: (
        "Funding amount (state it explicitly), use of funds broken down by area, "
        "milestones the round unlocks"
    ),
    SlideCategory.appendix: "Supporting data, detailed figures, references",
    SlideCategory.video: "Short narrative that frames the video for investors",
    SlideCategory.intro_video: "Founder introduction and the one-line pitch",
}

_MARKET_REVISION_GUIDANCE = """
For market analysis slides, include:
- Specific market size data (TAM, SAM, SOM)
- Growth rates and trends
- Key market drivers
- Competitive landscape insights
- Market segmentation
- Regulatory considerations
"""

_OUTLINE_CATEGORIES = "|".join(
    c.value for c in SlideCategory
    if c not in (SlideCategory.qa_chat, SlideCategory.video, SlideCategory.intro_video)
)


def _context_lines(context: StartupContext) -> str:
    lines = [
        f"Business: {context.topic}",
        f"Industry: {context.industry or 'Unspecified'}",
        f"Audience: {context.audience}",
    ]
    if context.company_name:
        lines.append(f"Company: {context.company_name}")
    if context.stage:
        lines.append(f"Funding Stage: {context.stage}")
    return "\n".join(lines)


def digest_prior_slides(prior_slides: list[SlideContent]) -> str:
    """One ``title: headline`` line per slide, keeping the expansion prompt bounded."""
    return "\n".join(f"{s.title}: {s.content.headline}" for s in prior_slides)


# ---------------------------------------------------------------------------
# Outline
# ---------------------------------------------------------------------------

def build_outline_prompt(context: StartupContext) -> str:
    existing = ""
    if context.existing_content:
        existing = (
            f"\n\nExisting Content to Enhance:\n{context.existing_content}\n\n"
            "Please analyze this existing content and create an enhanced outline "
            "that builds upon it while following pitch deck best practices."
        )

    stage = f"\nFunding Stage: {context.stage}" if context.stage else ""
    company = f"\nCompany Name: {context.company_name}" if context.company_name else ""
    enhance = " Incorporate and enhance the existing content provided." if context.existing_content else ""

    return f"""
Create a {context.slide_count}-slide pitch deck outline for a {context.industry or 'early-stage'} startup.

Business Description: {context.topic}
Target Audience: {context.audience}
Slide Count: {context.slide_count}{company}{stage}{existing}

Generate a JSON response with this exact structure:
{{
  "slides": [
    {{
      "id": 1,
      "title": "Slide Title",
      "type": "{_OUTLINE_CATEGORIES}",
      "contentSummary": "Brief description of what this slide covers"
    }}
  ],
  "totalSlides": {context.slide_count}
}}

Focus on investor priorities:
1. Problem & Market Opportunity
2. Solution & Product
3. Traction & Business Model
4. Team & Financials
5. Funding Ask

Make slide titles compelling and specific to this business.{enhance}"""


# ---------------------------------------------------------------------------
# Expansion
# ---------------------------------------------------------------------------

def build_slide_prompt(
    stub: SlideStub,
    context: StartupContext,
    prior_slides: list[SlideContent],
) -> str:
    previous = ""
    if prior_slides:
        previous = (
            "\n\nPrevious slides context (stay consistent with these, "
            "do not contradict their numbers):\n" + digest_prior_slides(prior_slides)
        )

    guidance = "\n".join(
        f"- {c.value}: {text}" for c, text in CATEGORY_GUIDANCE.items()
    )
    focus = CATEGORY_GUIDANCE.get(stub.category, "")
    summary = f"\nSlide Summary: {stub.content_summary}" if stub.content_summary else ""

    return f"""
Generate slide content for this pitch deck slide:

Slide: {stub.title} (Type: {stub.category.value}){summary}
{_context_lines(context)}{previous}

Create compelling, investor-focused content. Return JSON with this exact structure:
{{
  "id": {stub.id},
  "title": {json.dumps(stub.title)},
  "type": "{stub.category.value}",
  "content": {{
    "headline": "Compelling main headline",
    "subheadline": "Optional supporting subheadline",
    "bullets": ["3-5 key bullet points", "that support the headline", "and drive the narrative"],
    "metrics": [{{"label": "Metric name", "value": "$123M", "context": "Brief context"}}],
    "callout": "Key insight or quote that reinforces the message",
    "nextSteps": ["What this means", "for investors"]
  }}
}}

Guidelines by slide type:
{guidance}

This slide must cover: {focus}

Make it specific to {context.industry or 'this business'} and {context.audience}. Use real-sounding metrics and examples."""


# ---------------------------------------------------------------------------
# Revision
# ---------------------------------------------------------------------------

def build_field_revision_prompt(
    slide_title: str,
    slide_content: str,
    category: SlideCategory,
    instruction: str,
    context: StartupContext,
) -> str:
    return f"""
You are an expert pitch deck consultant. Improve this slide based on the user's request.

SLIDE DETAILS:
- Title: {json.dumps(slide_title)}
- Content: {json.dumps(slide_content)}
- Category: {category.value}
- Business Context: {context.topic}
- Industry: {context.industry or 'Unspecified'}
- Target Audience: {context.audience}

USER REQUEST:
{json.dumps(instruction)}

Please improve this slide based on the user's request. Focus on making it more compelling, clear, and tailored to {context.audience}.

Return only a JSON object with these fields:
{{
  "improvedTitle": "The improved slide title",
  "improvedContent": "The improved summary of the slide"
}}

Make sure the improvements are specific and actionable while maintaining the slide's core purpose."""


def frame_deck_wide_instruction(instruction: str, slide: SlideContent) -> str:
    return f"""DECK-WIDE IMPROVEMENT: {instruction}

This change should be applied consistently across the entire presentation. Consider how this change affects the overall narrative and flow of the deck.

Current slide context: {slide.title} ({slide.category.value})

Apply the requested changes while maintaining the slide's specific purpose and ensuring consistency with the overall deck theme."""


def build_slide_revision_prompt(
    slide: SlideContent,
    instruction: str,
    context: StartupContext,
) -> str:
    body = slide.content
    market = _MARKET_REVISION_GUIDANCE if slide.category == SlideCategory.market else ""
    metrics = [m.model_dump(by_alias=True, exclude_none=True) for m in body.metrics or []]

    return f"""
Improve this entire slide based on the user's request. You are an expert pitch deck consultant; keep bullets, metrics and callout consistent with each other.

CURRENT SLIDE:
- Title: {json.dumps(slide.title)}
- Type: {slide.category.value}
- Headline: {json.dumps(body.headline)}
- Subheadline: {json.dumps(body.subheadline or 'None')}
- Bullets: {json.dumps(body.bullets)}
- Metrics: {json.dumps(metrics)}
- Callout: {json.dumps(body.callout or 'None')}
- Next Steps: {json.dumps(body.next_steps or [])}

BUSINESS CONTEXT:
- Topic: {context.topic}
- Industry: {context.industry or 'Unspecified'}
- Audience: {context.audience}

USER REQUEST:
{instruction}

Please improve this slide based on the user's request. Focus on making it more compelling, clear, and tailored to {context.audience}.
{market}
Return a JSON object with this structure:
{{
  "id": {slide.id},
  "title": "Improved slide title",
  "type": "{slide.category.value}",
  "content": {{
    "headline": "Main headline for the slide",
    "subheadline": "Optional subheadline",
    "bullets": ["Bullet point 1", "Bullet point 2", "Bullet point 3"],
    "metrics": [{{"label": "Metric Name", "value": "$100B", "context": "Additional context"}}],
    "callout": "Important callout message",
    "nextSteps": ["Next step 1", "Next step 2"]
  }}
}}

Make the improvements specific, actionable, and professional. Include real data when possible."""


def build_suggestion_prompt(
    current_content: str,
    category: SlideCategory,
    context: StartupContext,
) -> str:
    return f"""
Suggest one improvement for this {category.value} pitch for a {context.industry or 'early-stage'} startup:

Current content: {current_content}

Business context: {context.topic}

Provide a specific, actionable improvement suggestion that will:
1. Make it more compelling to investors
2. Add credibility with specific details
3. Improve clarity and impact

Return only the suggestion text, not JSON."""


# ---------------------------------------------------------------------------
# Guided questions
# ---------------------------------------------------------------------------

def build_questions_prompt(description: str) -> str:
    return f"""
Based on this startup description, generate 5 essential pitch deck questions and provide intelligent AI-generated answers for each.

Startup Description: {json.dumps(description)}

Create questions that would help build a compelling pitch deck. For each question, provide a thoughtful answer based on the startup description provided.

Return a JSON array with this structure:
[
  {{
    "id": "problem",
    "question": "What specific problem does your startup solve?",
    "aiAnswer": "A detailed, intelligent answer based on the startup description"
  }}
]

Make sure the AI answers are:
1. Specific and detailed based on the startup description
2. Compelling and investor-focused
3. Realistic and credible
4. 2-3 sentences long
5. Directly related to the startup described

Cover these 5 key areas, using these ids: problem, solution, market, business-model, ask."""
