"""Payload extraction from free-form model output."""

import json
import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

# First fenced block, with or without a "json" language tag
_FENCED_BLOCK = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```")


class PayloadError(ValueError):
    """Raised when a payload cannot be turned into a canonical record."""

    pass


class PayloadDecodeError(PayloadError):
    """Raised when the text does not contain parseable JSON."""

    def __init__(self, message: str, snippet: str = ""):
        super().__init__(message)
        self.snippet = snippet


class PayloadShapeError(PayloadError):
    """Raised when parsed JSON is not shaped like a valuation report."""

    pass


def extract_json_text(text: str) -> str:
    """
    Pull the JSON document out of a model response.

    Returns the body of the first fenced code block if there is one,
    otherwise the whole text, trimmed.
    """
    match = _FENCED_BLOCK.search(text)
    if match and match.group(1):
        return match.group(1).strip()
    return text.strip()


def parse_payload(text: str) -> dict[str, Any]:
    """
    Decode a model response into a raw payload mapping.

    Args:
        text: Model response, optionally wrapping the JSON in a fenced block

    Returns:
        Decoded JSON object

    Raises:
        PayloadDecodeError: If no JSON could be decoded
        PayloadShapeError: If the decoded JSON is not an object
    """
    if not text or not text.strip():
        raise PayloadDecodeError("Empty response text")

    json_text = extract_json_text(text)
    try:
        data = json.loads(json_text)
    except json.JSONDecodeError as e:
        logger.debug(f"Failed to parse JSON payload: {json_text[:200]!r}")
        raise PayloadDecodeError(f"Invalid JSON payload: {e}", snippet=json_text[:200]) from e

    if not isinstance(data, dict):
        raise PayloadShapeError(
            f"Payload must be a JSON object, got {type(data).__name__}"
        )
    return data
