"""Pass-through sanitization for text fields and source citations."""

from typing import Any


def text_or_default(value: Any, fallback: str = "") -> str:
    """
    Pass a free-text field through unchanged.

    None and empty strings become the fallback; non-string scalars are
    stringified.

    Args:
        value: Raw field value (may be None)
        fallback: Replacement for absent values

    Returns:
        Text value
    """
    if value is None or value == "":
        return fallback
    if isinstance(value, str):
        return value
    return str(value)


def text_list(value: Any) -> list[str]:
    """Coerce a list of narrative items to strings. Non-lists become []."""
    if not isinstance(value, list):
        return []
    return [item if isinstance(item, str) else str(item) for item in value if item is not None]


def sanitize_sources(entries: Any) -> list[dict[str, str]]:
    """
    Keep usable source citations.

    Accepts either plain {title, uri} entries or grounding chunks shaped
    {web: {title, uri}}. Entries without a non-empty title and uri are
    dropped; duplicates by uri keep the first occurrence.

    Args:
        entries: Raw source list (anything else yields [])

    Returns:
        Ordered, deduplicated list of {title, uri}
    """
    if not isinstance(entries, list):
        return []

    seen: set[str] = set()
    sources: list[dict[str, str]] = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        web = entry.get("web")
        if isinstance(web, dict):
            entry = web

        title = entry.get("title")
        uri = entry.get("uri")
        if not isinstance(title, str) or not isinstance(uri, str):
            continue
        if not title or not uri or uri in seen:
            continue

        seen.add(uri)
        sources.append({"title": title, "uri": uri})

    return sources
