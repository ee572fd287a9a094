"""Response metadata and provenance utilities."""

from typing import Any

from valuation_mcp import SCHEMA_VERSION, SERVER_VERSION


def build_meta(tool: str, duration_ms: float | None = None) -> dict[str, Any]:
    """
    Build standard metadata block for responses.

    Args:
        tool: Name of the tool producing this response
        duration_ms: Execution time in milliseconds (optional)

    Returns:
        Metadata dict with version info
    """
    meta: dict[str, Any] = {
        "server_version": SERVER_VERSION,
        "schema_version": SCHEMA_VERSION,
        "tool": tool,
    }
    if duration_ms is not None:
        meta["duration_ms"] = round(duration_ms, 1)
    return meta


def build_provenance(
    source: str,
    as_of: str | None = None,
    **kwargs: Any,
) -> dict[str, Any]:
    """
    Build provenance block for a sanitized payload.

    Args:
        source: Producer of the payload (e.g., "external_model")
        as_of: Report date claimed by the payload (lastUpdated)
        **kwargs: Additional provenance fields

    Returns:
        Provenance dict with a warnings list
    """
    prov: dict[str, Any] = {"source": source}
    if as_of:
        prov["as_of"] = as_of

    prov.update(kwargs)

    if "warnings" not in prov:
        prov["warnings"] = []

    return prov


def build_error_response(
    error_type: str,
    message: str,
    ticker: str | None = None,
) -> dict[str, Any]:
    """
    Build standardized error response.

    Args:
        error_type: Type of error (invalid_payload, invalid_shape)
        message: Human-readable error message
        ticker: Ticker the payload claimed to describe (if known)

    Returns:
        Error response dict
    """
    response: dict[str, Any] = {
        "error": True,
        "error_type": error_type,
        "message": message,
        "meta": build_meta("error"),
    }

    if ticker is not None:
        response["ticker"] = ticker

    return response
