from typing import Optional


def clean_input(text: Optional[str]) -> str:
    """Trim surrounding whitespace from user-typed text. None becomes ''."""
    if text is None:
        return ""
    return text.strip()


def normalize_query(query: Optional[str]) -> Optional[str]:
    """
    Prepare a filter query for matching.

    Returns None when there is nothing to filter on, so callers can
    treat a blank search box as "no filter". Otherwise the query is
    casefolded as typed; surrounding spaces are part of the match.
    """
    if query is None or not query.strip():
        return None
    return query.casefold()


def contains_casefold(haystack: str, needle: str) -> bool:
    """Case-insensitive substring test. `needle` must already be casefolded."""
    return needle in (haystack or "").casefold()
