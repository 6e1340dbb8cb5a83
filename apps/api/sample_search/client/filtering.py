"""Free-text search over enriched rows.

The input is split on ';' into tokens; a row matches when every token is a
case-insensitive substring of at least one of its searchable values.
"""

from typing import Sequence

from .enrichment import EnrichedPatient

TOKEN_SEPARATOR = ";"


def tokenize(query: str) -> list[str]:
    tokens = (t.strip().lower() for t in (query or "").split(TOKEN_SEPARATOR))
    return [t for t in tokens if t]


def matches(item: EnrichedPatient, tokens: Sequence[str]) -> bool:
    values = [v.lower() for v in item.searchable_values() if v]
    return all(any(token in v for v in values) for token in tokens)


def filter_patients(items: Sequence[EnrichedPatient], query: str) -> list[EnrichedPatient]:
    tokens = tokenize(query)
    if not tokens:
        return list(items)
    return [item for item in items if matches(item, tokens)]
