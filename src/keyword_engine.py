"""
Keyword Extraction Engine.

Turns raw resume or job description text into an ordered, deduplicated
list of normalized keywords. The list keeps first-occurrence order so
missing keywords can be displayed in the order the job description
mentions them.
"""

import re
from collections.abc import Collection, Iterator
from typing import Optional

# * Common function words that never count as keywords
STOPWORDS: frozenset[str] = frozenset({
    "and", "the", "for", "with", "you", "that",
    "this", "from", "have", "are", "but",
})

MIN_KEYWORD_LENGTH = 3

# * Anything outside ASCII letters and digits separates tokens (underscore included)
TOKEN_SEPARATOR = re.compile(r"[^a-z0-9]+")

NUMERIC_TOKEN = re.compile(r"\d+(?:\.\d+)?", re.ASCII)


def iter_tokens(text: Optional[str]) -> Iterator[str]:
    """
    Yield lowercase tokens from text, skipping empty segments.

    Args:
        text: Raw text. None is treated as empty.

    Yields:
        Tokens in the order they appear.
    """
    if not text:
        return

    for token in TOKEN_SEPARATOR.split(text.lower()):
        if token:
            yield token


def is_numeric(token: str) -> bool:
    """Return True if the whole token is an integer or decimal literal."""
    return NUMERIC_TOKEN.fullmatch(token) is not None


def is_keyword(token: str, stopwords: Collection[str] = STOPWORDS) -> bool:
    """
    Check whether a token qualifies as a keyword.

    Args:
        token: Lowercase token from iter_tokens.
        stopwords: Words to exclude.

    Returns:
        True if the token is long enough, not a stopword and not a number.
    """
    return (
        len(token) >= MIN_KEYWORD_LENGTH
        and token not in stopwords
        and not is_numeric(token)
    )


def extract_keywords(
    text: Optional[str],
    stopwords: Collection[str] = STOPWORDS,
) -> list[str]:
    """
    Extract the keyword set of a text.

    Args:
        text: Raw text (PDF-extracted or plain). None yields an empty list.
        stopwords: Words to exclude, defaults to STOPWORDS.

    Returns:
        Unique keywords in first-occurrence order.
    """
    # * dict keeps insertion order, so this dedupes in a single pass
    keywords = dict.fromkeys(
        token for token in iter_tokens(text) if is_keyword(token, stopwords)
    )
    return list(keywords)
