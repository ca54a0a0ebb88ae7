"""English stopword list used when deriving API names from free text."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

ENGLISH_STOPWORDS: frozenset[str] = frozenset(
    {
        "about",
        "after",
        "all",
        "also",
        "am",
        "an",
        "and",
        "another",
        "any",
        "are",
        "as",
        "at",
        "be",
        "because",
        "been",
        "before",
        "being",
        "between",
        "both",
        "but",
        "by",
        "came",
        "can",
        "come",
        "could",
        "did",
        "do",
        "each",
        "for",
        "from",
        "get",
        "got",
        "has",
        "had",
        "he",
        "have",
        "her",
        "here",
        "him",
        "himself",
        "his",
        "how",
        "if",
        "in",
        "into",
        "is",
        "it",
        "like",
        "make",
        "many",
        "me",
        "might",
        "more",
        "most",
        "much",
        "must",
        "my",
        "never",
        "now",
        "of",
        "on",
        "only",
        "or",
        "other",
        "our",
        "out",
        "over",
        "said",
        "same",
        "see",
        "should",
        "since",
        "some",
        "still",
        "such",
        "take",
        "than",
        "that",
        "the",
        "their",
        "them",
        "then",
        "there",
        "these",
        "they",
        "this",
        "those",
        "through",
        "to",
        "too",
        "under",
        "up",
        "very",
        "was",
        "way",
        "we",
        "well",
        "were",
        "what",
        "where",
        "which",
        "while",
        "who",
        "with",
        "would",
        "you",
        "your",
        "a",
        "i",
    }
)


def remove_stopwords(
    words: Sequence[str], stopwords: Iterable[str] = ENGLISH_STOPWORDS
) -> list[str]:
    """Return `words` without stopwords, keeping order.

    Matching is case-insensitive: "The" is dropped just like "the".
    """

    stop = stopwords if isinstance(stopwords, frozenset | set) else frozenset(stopwords)
    return [word for word in words if word.lower() not in stop]
