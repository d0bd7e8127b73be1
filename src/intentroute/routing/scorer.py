"""Keyword scoring and category selection.

Scores a normalized utterance against every category's compiled matcher
and picks a single category. All of this is local and deterministic:
regex + substring checks, no model calls.

Scoring per category:
1. A negative keyword anywhere zeroes the category (other categories are
   unaffected)
2. +1 per multi-word phrase found as a substring
3. +1 per non-overlapping single-word match (word boundaries only)
4. Multiplied by the category weight

Selection walks a fixed priority list so that ambiguous questions
("calcule e explique ...") always resolve the same way.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from .categories import KEYWORD_CATEGORIES, Category
from .matcher import CompiledMatcher, MatcherRegistry
from .normalizer import normalize

# Factual keywords are short and very common ("quando", "onde"), so they
# are dampened to avoid false positives.
CATEGORY_WEIGHTS: dict[Category, float] = {
    Category.WEB_SEARCH: 1.0,
    Category.COMPLEX: 1.0,
    Category.FACTUAL: 0.8,
    Category.MATHEMATICAL: 1.0,
    Category.CREATIVE: 1.0,
}

# Specific intents first, broad intents last. Order decides ties.
PRIORITY_ORDER: tuple[Category, ...] = (
    Category.MATHEMATICAL,
    Category.WEB_SEARCH,
    Category.CREATIVE,
    Category.COMPLEX,
    Category.FACTUAL,
)

MIN_CATEGORY_SCORE = 1.0


@dataclass
class ScoringResult:
    """Result of scoring an utterance."""
    category: Category
    score: float  # Weighted score of the selected category (0.0 for SIMPLE)
    scores: dict[Category, float] = field(default_factory=dict)  # weighted
    raw_scores: dict[Category, float] = field(default_factory=dict)
    negated: frozenset[Category] = frozenset()
    normalized_text: str = ""

    @property
    def matched(self) -> bool:
        """True if keyword evidence selected the category."""
        return self.category is not Category.SIMPLE

    @property
    def explanation(self) -> str:
        """Human-readable summary of the decision."""
        top = sorted(self.scores.items(), key=lambda x: x[1], reverse=True)[:3]
        factors = ", ".join(f"{k.value}={v:.1f}" for k, v in top if v > 0)
        return f"Category={self.category.value} (scores: {factors or 'none'})"


def _evaluate(normalized_text: str, matcher: CompiledMatcher | None) -> tuple[float, bool]:
    """Unweighted score and negation flag for one category."""
    if matcher is None:
        return 0.0, False
    if matcher.is_negated(normalized_text):
        return 0.0, True
    return float(matcher.count(normalized_text)), False


def score(normalized_text: str, matcher: CompiledMatcher | None) -> float:
    """Unweighted score of already-normalized text for one category."""
    return _evaluate(normalized_text, matcher)[0]


def select_category(weighted_scores: Mapping[Category, float]) -> Category:
    """Pick the winning category.

    A category wins only if it strictly beats every higher-priority
    category's score and reaches MIN_CATEGORY_SCORE. Nothing qualifying
    means SIMPLE.
    """
    best = Category.SIMPLE
    max_score = 0.0

    for category in PRIORITY_ORDER:
        value = weighted_scores.get(category, 0.0)
        if value > max_score and value >= MIN_CATEGORY_SCORE:
            max_score = value
            best = category

    return best


class Scorer:
    """Scores utterances against a compiled matcher registry.

    Usage:
        scorer = Scorer(build_registry())
        result = scorer.score_all("Calcule a raiz quadrada de 144")
        # result.category == Category.MATHEMATICAL
    """

    def __init__(self, registry: MatcherRegistry):
        self.registry = registry

    def score_all(self, utterance: str) -> ScoringResult:
        """Normalize once, score every category and select one.

        Args:
            utterance: Raw (already sanitized) user text.

        Returns:
            ScoringResult with the selected category and weighted scores.
        """
        text = normalize(utterance)
        scores: dict[Category, float] = {}
        raw_scores: dict[Category, float] = {}
        negated: set[Category] = set()

        for category in KEYWORD_CATEGORIES:
            raw, is_negated = _evaluate(text, self.registry.get(category))
            if is_negated:
                negated.add(category)
            raw_scores[category] = raw
            scores[category] = raw * CATEGORY_WEIGHTS[category]

        category = select_category(scores)

        return ScoringResult(
            category=category,
            score=scores.get(category, 0.0),
            scores=scores,
            raw_scores=raw_scores,
            negated=frozenset(negated),
            normalized_text=text,
        )
