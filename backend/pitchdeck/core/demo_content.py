"""
Deterministic synthetic output used when the generative service is unavailable.

The generator is keyed on substrings of the instruction, so the rest of the
pipeline (and its tests) behaves identically with or without network access.
Every branch serialises constant data, so the same instruction always yields
byte-identical text.
"""

from __future__ import annotations

import json
import re

DECK_WIDE_MARKER = "DECK-WIDE IMPROVEMENT"
WHOLE_SLIDE_MARKER = "Improve this entire slide"
SLIDE_CONTENT_MARKER = "slide content"
OUTLINE_MARKER = "outline"

_TITLE_RE = re.compile(r'Title: "([^"]+)"')
_TYPE_RE = re.compile(r"Type: ([\w-]+)")


_DEMO_OUTLINE = {
    "slides": [
        {"id": 1, "title": "Company Overview", "type": "title",
         "contentSummary": "Introduction to your startup and vision"},
        {"id": 2, "title": "Problem & Opportunity", "type": "problem",
         "contentSummary": "Market problem and opportunity size"},
        {"id": 3, "title": "Our Solution", "type": "solution",
         "contentSummary": "Product overview and unique value proposition"},
        {"id": 4, "title": "Market Analysis", "type": "market",
         "contentSummary": "Target market and competitive landscape"},
        {"id": 5, "title": "Product Demo", "type": "product",
         "contentSummary": "Key features and user experience"},
        {"id": 6, "title": "Traction & Growth", "type": "traction",
         "contentSummary": "Current metrics and growth trajectory"},
        {"id": 7, "title": "Business Model", "type": "business-model",
         "contentSummary": "Revenue model and unit economics"},
        {"id": 8, "title": "Team", "type": "team",
         "contentSummary": "Core team and key advisors"},
        {"id": 9, "title": "Financial Projections", "type": "financials",
         "contentSummary": "Revenue projections and key metrics"},
        {"id": 10, "title": "Funding Ask", "type": "ask",
         "contentSummary": "Investment amount and use of funds"},
    ],
    "totalSlides": 10,
}

_DEMO_SLIDES: dict[str, dict] = {
    "title": {
        "id": 1,
        "title": "AI Patent Platform",
        "type": "title",
        "content": {
            "headline": "Revolutionizing Patent Filing with AI",
            "subheadline": "Get patents in minutes, not months",
            "bullets": [
                "AI-powered patent drafting in under 5 minutes",
                "90% faster than traditional patent attorneys",
                "Affordable patent protection for everyone",
            ],
            "callout": "Join the patent revolution - fast, affordable, AI-powered",
        },
    },
    "problem": {
        "id": 2,
        "title": "The Patent Problem",
        "type": "problem",
        "content": {
            "headline": "Patent Filing is Broken",
            "subheadline": "Current patent process creates massive barriers for innovators",
            "bullets": [
                "Average patent takes 18-24 months to file",
                "Patent attorneys charge $10,000-$15,000 per application",
                "90% of inventors never get patent protection",
                "Complex legal language prevents innovation",
            ],
            "metrics": [
                {"label": "Average Cost", "value": "$12,500", "context": "Per patent application"},
                {"label": "Time to File", "value": "18 months", "context": "Industry average"},
                {"label": "Success Rate", "value": "10%", "context": "Inventors who get patents"},
            ],
            "callout": "Innovation is being stifled by an outdated, expensive system",
        },
    },
    "solution": {
        "id": 3,
        "title": "Our AI Solution",
        "type": "solution",
        "content": {
            "headline": "AI-Powered Patent Platform",
            "subheadline": "Revolutionary technology that makes patents accessible to everyone",
            "bullets": [
                "AI analyzes your invention and generates patent application",
                "Natural language interface - no legal expertise required",
                "Automated prior art search and claim optimization",
                "Direct filing with USPTO through our platform",
            ],
            "metrics": [
                {"label": "Filing Time", "value": "5 minutes", "context": "From idea to application"},
                {"label": "Cost Reduction", "value": "95%", "context": "vs traditional attorneys"},
                {"label": "Success Rate", "value": "85%", "context": "Patent approvals"},
            ],
            "callout": "Transform your ideas into protected intellectual property instantly",
        },
    },
    "market": {
        "id": 4,
        "title": "Market Opportunity",
        "type": "market",
        "content": {
            "headline": "Massive Patent Market Ready for Disruption",
            "subheadline": "Multi-billion dollar opportunity in intellectual property services",
            "bullets": [
                "Global patent market valued at $4.2B annually",
                "Growing 8.2% year-over-year driven by innovation",
                "Underserved market of 50M+ inventors worldwide",
                "AI and automation creating new patent categories",
            ],
            "metrics": [
                {"label": "Market Size", "value": "$4.2B", "context": "Global patent services market"},
                {"label": "Growth Rate", "value": "8.2%", "context": "Annual market growth"},
                {"label": "Target Market", "value": "50M+", "context": "Potential inventors"},
            ],
            "callout": "First-mover advantage in AI-powered patent services",
        },
    },
}

_DEMO_DEFAULT_SLIDE = {
    "id": 1,
    "title": "Key Information",
    "type": "default",
    "content": {
        "headline": "Essential Business Information",
        "subheadline": "Critical details about our startup and market opportunity",
        "bullets": [
            "Strong product-market fit with proven demand",
            "Experienced team with domain expertise",
            "Clear path to profitability and scale",
        ],
        "callout": "Positioned for significant growth and market impact",
    },
}


def _demo_revision(instruction: str) -> dict:
    lowered = instruction.lower()
    is_color_change = "red" in lowered and "purple" in lowered
    is_text_improvement = "more compelling" in lowered or "better" in lowered

    title_match = _TITLE_RE.search(instruction)
    type_match = _TYPE_RE.search(instruction)
    slide_title = title_match.group(1) if title_match else "Enhanced Slide"
    slide_type = type_match.group(1) if type_match else "default"

    if is_color_change:
        headline = "Patent Filing Revolution"
        subheadline = "Transform your patent process with AI technology"
        bullets = [
            "AI-powered patent drafting technology",
            "Streamlined filing process",
            "Cost-effective patent protection",
        ]
        callout = "Revolutionary patent technology powered by advanced AI"
    else:
        headline = "Enhanced Business Strategy"
        subheadline = "Optimized approach for maximum impact"
        bullets = [
            "Strategic market positioning",
            "Competitive advantage development",
            "Scalable business model",
        ]
        callout = "Strategic advantage through innovative approach"

    return {
        "id": 1,
        "title": f"{slide_title} - Enhanced" if is_text_improvement else slide_title,
        "type": slide_type,
        "content": {
            "headline": headline,
            "subheadline": subheadline,
            "bullets": bullets,
            "metrics": [
                {"label": "Processing Time", "value": "5 min", "context": "Patent application"},
                {"label": "Cost Savings", "value": "95%", "context": "vs traditional methods"},
            ],
            "callout": callout,
        },
    }


def _demo_slide(instruction: str) -> dict:
    for slide_type, slide in _DEMO_SLIDES.items():
        if f"Type: {slide_type})" in instruction or f"Type: {slide_type}\n" in instruction:
            return slide
    return _DEMO_DEFAULT_SLIDE


def generate_demo_content(instruction: str) -> str:
    """Return canned JSON-shaped text for *instruction*."""
    if DECK_WIDE_MARKER in instruction or WHOLE_SLIDE_MARKER in instruction:
        payload = _demo_revision(instruction)
    elif OUTLINE_MARKER in instruction:
        payload = _DEMO_OUTLINE
    elif SLIDE_CONTENT_MARKER in instruction:
        payload = _demo_slide(instruction)
    else:
        payload = {
            "error": "Demo mode active",
            "message": "This is demo content. Please provide a valid OpenAI API key for full functionality.",
            "prompt": f"{instruction[:100]}...",
        }
    return json.dumps(payload, indent=2)
