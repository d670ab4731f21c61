"""Assemble the provider query string from intent plus optional hints."""

from typing import Optional


def build_search_query(
    query: str,
    budget: Optional[int] = None,
    location: Optional[str] = None,
) -> str:
    """Return ``"<query> in <location> budget <budget>"``, skipping absent clauses."""
    parts = [query.strip()]
    if location:
        parts.append(f"in {location}")
    if budget:
        parts.append(f"budget {budget}")
    return " ".join(parts)
