"""
Parse-then-validate boundary between free-text model output and typed models.

The generative service is asked for JSON but is free to wrap it in prose or
markdown fences.  ``extract_json`` finds the first balanced ``{...}`` (or
``[...]``) span that decodes as JSON; ``decode_model`` validates that value
against a pydantic model.  Both return ``None`` instead of raising so each
caller can substitute its own typed fallback.
"""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

_CLOSERS = {"{": "}", "[": "]"}


def _balanced_span(text: str, start: int) -> str | None:
    """Return the balanced span opening at ``text[start]``, or ``None`` if it never closes.

    Brackets inside JSON string literals are ignored.
    """
    opener = text[start]
    closer = _CLOSERS[opener]
    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == opener:
            depth += 1
        elif ch == closer:
            depth -= 1
            if depth == 0:
                return text[start:i + 1]
    return None


def extract_json(text: str, opener: str = "{") -> Any | None:
    """Decode the first balanced span starting with *opener* that is valid JSON.

    Parameters
    ----------
    text:
        Raw model output.
    opener:
        ``"{"`` to look for an object, ``"["`` to look for an array.
    """
    if opener not in _CLOSERS:
        raise ValueError(f"Unsupported opener {opener!r}")
    if not text:
        return None

    start = text.find(opener)
    while start != -1:
        span = _balanced_span(text, start)
        if span is None:
            # Unclosed from here on; later openers sit inside this span.
            return None
        try:
            return json.loads(span)
        except json.JSONDecodeError:
            start = text.find(opener, start + 1)
    return None


def decode_model(text: str, model: type[M], *, what: str = "response") -> M | None:
    """Extract the first JSON object from *text* and validate it as *model*.

    Returns ``None`` (and logs why) when no object is found or validation fails.
    """
    data = extract_json(text, "{")
    if data is None:
        logger.warning("No JSON object found in %s", what)
        return None
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.warning("Invalid %s: %s", what, e.errors(include_url=False))
        return None


def decode_list(text: str, item_type: type[M], *, what: str = "response") -> list[M] | None:
    """Extract the first JSON array from *text* and validate it as ``list[item_type]``."""
    data = extract_json(text, "[")
    if data is None:
        logger.warning("No JSON array found in %s", what)
        return None
    try:
        return TypeAdapter(list[item_type]).validate_python(data)
    except ValidationError as e:
        logger.warning("Invalid %s: %s", what, e.errors(include_url=False))
        return None
