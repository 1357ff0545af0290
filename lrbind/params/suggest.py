"""
Fuzzy Matching for Parameter Suggestions.

Provides "did you mean?" functionality using rapidfuzz, e.g. when a
parameter is looked up by a misspelled name ("Exposur" -> "Exposure").
"""

from typing import List, Iterable

from rapidfuzz import process, fuzz

# Minimum similarity score (0-100) to consider a match
MIN_SIMILARITY_SCORE = 60

# Maximum number of suggestions to return
MAX_SUGGESTIONS = 3


def suggest_similar(
    unknown: str,
    valid_options: Iterable[str],
    min_score: int = MIN_SIMILARITY_SCORE,
    max_suggestions: int = MAX_SUGGESTIONS,
) -> List[str]:
    """
    Find similar strings from valid_options that match the unknown string.

    Args:
        unknown: The unknown/misspelled string to match.
        valid_options: Iterable of valid strings to match against.
        min_score: Minimum similarity score (0-100) to include a match.
        max_suggestions: Maximum number of suggestions to return.

    Returns:
        List of similar valid options, sorted by similarity (best first).
    """
    if not unknown:
        return []

    # rapidfuzz needs an indexable sequence
    options_list = list(valid_options)
    if not options_list:
        return []

    matches = process.extract(
        unknown,
        options_list,
        scorer=fuzz.WRatio,
        limit=max_suggestions,
        score_cutoff=min_score,
    )

    return [match[0] for match in matches]


def format_suggestion(suggestions: List[str]) -> str:
    if not suggestions:
        return ""

    if len(suggestions) == 1:
        return f"Did you mean '{suggestions[0]}'?"
    quoted = [f"'{s}'" for s in suggestions]
    return f"Did you mean one of: {', '.join(quoted)}?"
