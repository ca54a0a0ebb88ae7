"""Unit tests for stopword removal."""

from __future__ import annotations

from metadata_labels.metadata.stopwords import ENGLISH_STOPWORDS, remove_stopwords


def test_remove_stopwords_keeps_order_of_remaining_words() -> None:
    words = ["the", "quick", "brown", "fox", "and", "a", "dog"]

    assert remove_stopwords(words) == ["quick", "brown", "fox", "dog"]


def test_remove_stopwords_is_case_insensitive() -> None:
    assert remove_stopwords(["The", "Account", "IS", "Locked"]) == ["Account", "Locked"]


def test_remove_stopwords_accepts_custom_list() -> None:
    assert remove_stopwords(["save", "the", "record"], stopwords=["save"]) == ["the", "record"]


def test_common_articles_are_stopwords() -> None:
    assert {"the", "a", "an"} <= ENGLISH_STOPWORDS
