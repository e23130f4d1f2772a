"""
Lexicons and matching primitives shared by the analyzers.

Matching is plain substring containment on lower-cased text, so a lexicon
word found inside a longer word ("reporting", "homework") still counts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

URGENCY_WORDS: tuple[str, ...] = ("urgent", "asap", "immediately", "critical", "emergency")
WORK_WORDS: tuple[str, ...] = ("meeting", "presentation", "report", "project", "client")
PERSONAL_WORDS: tuple[str, ...] = ("personal", "family", "health", "home", "shopping")
POSITIVE_WORDS: tuple[str, ...] = ("good", "great", "excellent", "happy", "success", "complete")
NEGATIVE_WORDS: tuple[str, ...] = ("problem", "issue", "urgent", "failure", "delay", "cancel")

STOPWORDS: frozenset[str] = frozenset(
    {
        "the", "and", "for", "are", "but", "not", "you", "all", "can", "had",
        "her", "was", "one", "our", "out", "day", "get", "has", "him", "his",
        "how", "its", "may", "new", "now", "old", "see", "two", "way", "who",
        "boy", "did", "she", "use", "air", "end", "why",
    }
)


@dataclass(frozen=True)
class Lexicons:
    """Read-only view of the word lists, handy for exposing as configuration."""

    urgency: tuple[str, ...] = URGENCY_WORDS
    work: tuple[str, ...] = WORK_WORDS
    personal: tuple[str, ...] = PERSONAL_WORDS
    positive: tuple[str, ...] = POSITIVE_WORDS
    negative: tuple[str, ...] = NEGATIVE_WORDS
    stopwords: frozenset[str] = STOPWORDS

    def as_dict(self) -> dict[str, list[str]]:
        return {
            "urgency": list(self.urgency),
            "work": list(self.work),
            "personal": list(self.personal),
            "positive": list(self.positive),
            "negative": list(self.negative),
            "stopwords": sorted(self.stopwords),
        }


DEFAULT_LEXICONS = Lexicons()


def contains_any(text: str, words: Iterable[str]) -> bool:
    lowered = text.lower()
    return any(word in lowered for word in words)


def count_matches(text: str, words: Iterable[str]) -> int:
    """Number of distinct lexicon words contained in ``text``."""
    lowered = text.lower()
    return sum(1 for word in set(words) if word in lowered)


def is_stopword(token: str, stopwords: frozenset[str] = STOPWORDS) -> bool:
    return token.lower() in stopwords
