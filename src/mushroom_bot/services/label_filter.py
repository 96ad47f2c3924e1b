from __future__ import annotations

from collections.abc import Iterable, Sequence


def has_any(targets: Iterable[str], candidates: Iterable[str]) -> bool:
    """Return True if any target equals any candidate, ignoring case."""
    lowered = {candidate.lower() for candidate in candidates}
    return any(target.lower() in lowered for target in targets)


def filter_labels(source: Sequence[str], exclude: Iterable[str]) -> list[str]:
    """
    Drop every element of ``source`` found in ``exclude``.

    Matching is exact and case-sensitive. Order and duplicates of
    ``source`` are preserved.
    """
    excluded = set(exclude)
    return [label for label in source if label not in excluded]
