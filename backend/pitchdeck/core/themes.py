"""
Static theme registry.

Populated once at import and read-only afterwards.  ``lookup_theme`` is total:
unknown identifiers resolve to the default ``modern`` theme.
"""

from __future__ import annotations

from types import MappingProxyType

from pitchdeck.schemas.theme import ThemeColors, ThemeDescriptor, ThemeFonts, ThemeStyles

DEFAULT_THEME_ID = "modern"

_INTER = ThemeFonts(heading="Inter, sans-serif", body="Inter, sans-serif")


def _theme(
    theme_id: str,
    name: str,
    colors: tuple[str, str, str, str, str, str],
    radius: str,
    shadow: str,
    gradient: str | None = None,
    fonts: ThemeFonts = _INTER,
) -> ThemeDescriptor:
    primary, secondary, accent, text, background, surface = colors
    return ThemeDescriptor(
        id=theme_id,
        name=name,
        colors=ThemeColors(
            primary=primary,
            secondary=secondary,
            accent=accent,
            text=text,
            background=background,
            surface=surface,
        ),
        fonts=fonts,
        styles=ThemeStyles(border_radius=radius, shadow=shadow, gradient=gradient),
    )


_THEMES: list[ThemeDescriptor] = [
    _theme(
        "modern", "Modern",
        ("#2563eb", "#1e40af", "#3b82f6", "#1f2937", "#ffffff", "#f8fafc"),
        "8px", "0 4px 6px -1px rgba(0, 0, 0, 0.1)",
        "linear-gradient(135deg, #2563eb 0%, #3b82f6 100%)",
    ),
    _theme(
        "vibrant", "Vibrant",
        ("#dc2626", "#b91c1c", "#f97316", "#1f2937", "#ffffff", "#fef2f2"),
        "12px", "0 8px 25px -1px rgba(220, 38, 38, 0.2)",
        "linear-gradient(135deg, #dc2626 0%, #f97316 100%)",
    ),
    _theme(
        "minimal", "Minimal",
        ("#374151", "#1f2937", "#6b7280", "#111827", "#ffffff", "#f9fafb"),
        "4px", "0 1px 3px 0 rgba(0, 0, 0, 0.1)",
    ),
    _theme(
        "corporate", "Corporate",
        ("#1e3a8a", "#1e40af", "#3730a3", "#1f2937", "#ffffff", "#f1f5f9"),
        "6px", "0 4px 6px -1px rgba(0, 0, 0, 0.1)",
        "linear-gradient(135deg, #1e3a8a 0%, #3730a3 100%)",
    ),
    _theme(
        "startup", "Startup",
        ("#7c3aed", "#5b21b6", "#a855f7", "#1f2937", "#ffffff", "#faf5ff"),
        "10px", "0 10px 15px -3px rgba(124, 58, 237, 0.1)",
        "linear-gradient(135deg, #7c3aed 0%, #a855f7 100%)",
    ),
    _theme(
        "investor", "Investor",
        ("#059669", "#047857", "#10b981", "#1f2937", "#ffffff", "#f0fdf4"),
        "8px", "0 4px 6px -1px rgba(5, 150, 105, 0.1)",
        "linear-gradient(135deg, #059669 0%, #10b981 100%)",
    ),
    _theme(
        "neonCyberpunk", "Neon Cyberpunk",
        ("#00f5ff", "#ff0080", "#39ff14", "#ffffff", "#0a0a0f", "rgba(15, 15, 25, 0.8)"),
        "0px", "0 0 20px rgba(0, 245, 255, 0.3), inset 0 0 20px rgba(255, 0, 128, 0.1)",
        "linear-gradient(135deg, #00f5ff 0%, #ff0080 50%, #39ff14 100%)",
        fonts=ThemeFonts(heading="JetBrains Mono, monospace", body="Inter, sans-serif"),
    ),
    _theme(
        "glassMorphism", "Glass Morphism",
        ("#8b5cf6", "#06b6d4", "#f59e0b", "#1f2937",
         "linear-gradient(135deg, #667eea 0%, #764ba2 100%)", "rgba(255, 255, 255, 0.1)"),
        "20px", "0 8px 32px 0 rgba(31, 38, 135, 0.37)",
        "linear-gradient(135deg, rgba(255, 255, 255, 0.1) 0%, rgba(255, 255, 255, 0.05) 100%)",
    ),
    _theme(
        "gradientMesh", "Gradient Mesh",
        ("#f093fb", "#f5576c", "#4facfe", "#2d3748",
         "linear-gradient(45deg, #f093fb 0%, #f5576c 25%, #4facfe 50%, #00f2fe 75%, #f093fb 100%)",
         "rgba(255, 255, 255, 0.95)"),
        "24px", "0 20px 40px rgba(240, 147, 251, 0.4)",
        "linear-gradient(135deg, #667eea 0%, #764ba2 25%, #f093fb 50%, #f5576c 75%, #4facfe 100%)",
    ),
    _theme(
        "retroTerminal", "Retro Terminal",
        ("#00ff00", "#ffff00", "#ff8c00", "#00ff00", "#000000", "#001100"),
        "0px", "0 0 10px rgba(0, 255, 0, 0.5), inset 0 0 10px rgba(0, 255, 0, 0.1)",
        "linear-gradient(90deg, #00ff00 0%, #ffff00 50%, #ff8c00 100%)",
        fonts=ThemeFonts(heading="Courier New, monospace", body="Courier New, monospace"),
    ),
    _theme(
        "brutalistModern", "Brutalist Modern",
        ("#ff6b6b", "#000000", "#ffd93d", "#000000", "#ffffff", "#f8f9fa"),
        "0px", "8px 8px 0px #000000",
        "linear-gradient(45deg, #ff6b6b 0%, #ffd93d 100%)",
        fonts=ThemeFonts(heading="Arial Black, sans-serif", body="Helvetica, sans-serif"),
    ),
]

THEMES = MappingProxyType({t.id: t for t in _THEMES})


def lookup_theme(theme_id: str | None) -> ThemeDescriptor:
    """Return the theme registered under *theme_id*, or the default theme."""
    return THEMES.get(theme_id or DEFAULT_THEME_ID, THEMES[DEFAULT_THEME_ID])


def list_themes() -> list[ThemeDescriptor]:
    return list(THEMES.values())
