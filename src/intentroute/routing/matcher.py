"""Keyword matcher compilation.

Each category's keywords are compiled once at startup into:
- a single word-boundary alternation over one-word keywords,
- a list of normalized multi-word phrases (substring checks),
- a word-boundary alternation over negative keywords.

The resulting registry is immutable and can be shared across threads.
"""

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .categories import Category
from .keywords import KeywordSet, build_keyword_sets
from .normalizer import normalize

logger = logging.getLogger(__name__)

MatcherRegistry = Mapping[Category, "CompiledMatcher"]


@dataclass(frozen=True)
class CompiledMatcher:
    """Pre-compiled keyword patterns for one category."""
    category: Category
    single_word_pattern: re.Pattern[str] | None
    phrases: tuple[str, ...]
    negative_pattern: re.Pattern[str] | None = None

    def is_negated(self, text: str) -> bool:
        """True if a negative keyword appears in the normalized text."""
        return bool(self.negative_pattern and self.negative_pattern.search(text))

    def count(self, text: str) -> float:
        """Count phrase hits plus non-overlapping single-word hits."""
        score = 0.0
        for phrase in self.phrases:
            if phrase in text:
                score += 1.0
        if self.single_word_pattern is not None:
            score += len(self.single_word_pattern.findall(text))
        return score


def _unique(items: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(items))


def _alternation(words: list[str]) -> re.Pattern[str] | None:
    if not words:
        return None
    return re.compile(r"\b(?:" + "|".join(re.escape(w) for w in words) + r")\b")


def build_matcher(
    category: Category,
    keywords: Iterable[str],
    negatives: Iterable[str] = (),
) -> CompiledMatcher:
    """Compile one category's keywords.

    Keywords that normalize to nothing (e.g. "%") are dropped. An empty
    keyword list is valid and yields a matcher that always scores zero.
    """
    normalized = _unique(k for k in (normalize(k) for k in keywords) if k)
    single_words = [k for k in normalized if " " not in k]
    phrases = tuple(k for k in normalized if " " in k)

    # Negatives keep phrases inside the alternation: "o que e" still
    # matches on word boundaries because spaces are literal.
    negative_words = _unique(k for k in (normalize(k) for k in negatives) if k)

    return CompiledMatcher(
        category=category,
        single_word_pattern=_alternation(single_words),
        phrases=phrases,
        negative_pattern=_alternation(negative_words),
    )


def build_registry(
    keyword_sets: Mapping[Category, KeywordSet] | None = None,
) -> MatcherRegistry:
    """Compile matchers for every category.

    Call once during application bootstrap and pass the result to the
    router. The returned mapping is read-only.
    """
    if keyword_sets is None:
        keyword_sets = build_keyword_sets()

    matchers: dict[Category, CompiledMatcher] = {}
    for category, keyword_set in keyword_sets.items():
        matcher = build_matcher(category, keyword_set.keywords, keyword_set.negatives)
        single_count = (
            len(matcher.single_word_pattern.pattern.split("|"))
            if matcher.single_word_pattern else 0
        )
        logger.debug(
            f"Compiled {category.value}: {single_count} words, "
            f"{len(matcher.phrases)} phrases, "
            f"negatives={'yes' if matcher.negative_pattern else 'no'}"
        )
        matchers[category] = matcher

    return MappingProxyType(matchers)
