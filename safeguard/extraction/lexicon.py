"""
Lexicon
Immutable keyword tables shared by every feature extractor
"""
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import FrozenSet, Iterable, List, Mapping, Optional

from config import (
    NEGATIVE_WORDS, POSITIVE_WORDS, CRITICAL_KEYWORDS, EMOTION_KEYWORDS
)


_NON_WORD = re.compile(r'\W+', re.ASCII)


def tokenize(text: Optional[str]) -> List[str]:
    """Lower-case and split on runs of non-word characters."""
    if not text:
        return []
    return [w for w in _NON_WORD.split(text.lower()) if w]


@dataclass(frozen=True)
class Lexicon:
    """
    Read-only lookup tables for keyword, sentiment and emotion scoring.

    All entries are stored lower-cased; callers match lower-cased tokens.
    """

    negative_words: FrozenSet[str]
    positive_words: FrozenSet[str]
    critical_keywords: FrozenSet[str]
    emotion_keywords: Mapping[str, FrozenSet[str]]

    @classmethod
    def from_words(
        cls,
        negative_words: Iterable[str],
        positive_words: Iterable[str],
        critical_keywords: Iterable[str],
        emotion_keywords: Mapping[str, Iterable[str]]
    ) -> "Lexicon":
        emotions = {
            label.lower(): frozenset(w.lower() for w in words)
            for label, words in emotion_keywords.items()
        }
        return cls(
            negative_words=frozenset(w.lower() for w in negative_words),
            positive_words=frozenset(w.lower() for w in positive_words),
            critical_keywords=frozenset(w.lower() for w in critical_keywords),
            emotion_keywords=MappingProxyType(emotions)
        )

    @property
    def emotions(self) -> List[str]:
        return list(self.emotion_keywords)


def build_default_lexicon() -> Lexicon:
    return Lexicon.from_words(
        NEGATIVE_WORDS,
        POSITIVE_WORDS,
        CRITICAL_KEYWORDS,
        EMOTION_KEYWORDS
    )


# Built once at import, shared by reference
DEFAULT_LEXICON = build_default_lexicon()
