"""
Shared FastAPI dependencies, the single source of truth for DI.

Routers take the text gateway from HERE so tests can swap it through
``app.dependency_overrides``.
"""

from pitchdeck.core.config import settings
from pitchdeck.core.gateway import TextGateway

__all__ = ["get_gateway"]


def get_gateway() -> TextGateway:
    """Build the text gateway from the current settings."""
    return TextGateway.from_settings(settings)
