"""Filtering — pure substring predicate over decimal-stringified values.

Invariants:
    - normalize_filter_term is idempotent: normalize(normalize(t)) == normalize(t)
    - Empty normalized term matches every value
    - Matching is case-insensitive (values are digits, terms are lowercased)
    - Whitespace is significant: " 2" is its own key and matches no decimal value
"""

from sortview.core.domain_types import FilterKey
from sortview.core.errors import InvalidInputError


def normalize_filter_term(term: str | None) -> FilterKey:
    """Map a raw search term to its filter context key."""
    if term is None:
        return FilterKey("")
    if not isinstance(term, str):
        raise InvalidInputError(
            f"Search term must be a string, got {type(term).__name__}",
            field="searchTerm",
        )
    return FilterKey(term.lower())


def matches_filter(value: int, key: FilterKey) -> bool:
    """True if the decimal form of value contains the filter key."""
    return not key or key in str(value)
