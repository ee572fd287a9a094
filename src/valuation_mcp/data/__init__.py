"""Data layer for decoding model payloads."""

from valuation_mcp.data.payload import (
    PayloadDecodeError,
    PayloadError,
    PayloadShapeError,
    extract_json_text,
    parse_payload,
)

__all__ = [
    "PayloadDecodeError",
    "PayloadError",
    "PayloadShapeError",
    "extract_json_text",
    "parse_payload",
]
