"""Tests for matcher compilation, scoring and category selection."""

import pytest

from intentroute.routing import Category, Scorer, build_matcher, normalize, select_category
from intentroute.routing.keywords import KeywordSet
from intentroute.routing.matcher import build_registry
from intentroute.routing.scorer import MIN_CATEGORY_SCORE, PRIORITY_ORDER, score


# ═══════════════════════════════════════════════════════════════
# 1. MATCHER COMPILER
# ═══════════════════════════════════════════════════════════════

class TestBuildMatcher:
    """Compiling keyword lists into patterns and phrases."""

    def test_word_boundary(self):
        matcher = build_matcher(Category.WEB_SEARCH, ["notícia"])
        assert matcher.count(normalize("Eu vi um noticiarista")) == 0
        assert matcher.count(normalize("Uma notícia")) == 1

    def test_phrases_and_single_words_are_split(self):
        matcher = build_matcher(Category.MATHEMATICAL, ["raiz quadrada", "raiz"])
        assert matcher.phrases == ("raiz quadrada",)
        # one phrase hit + two single-word hits
        assert matcher.count("raiz quadrada de raiz") == 3.0

    def test_keywords_are_normalized_and_deduplicated(self):
        matcher = build_matcher(Category.WEB_SEARCH, ["Notícia", "notícias", "noticia"])
        assert matcher.single_word_pattern.pattern == r"\b(?:noticia)\b"
        assert matcher.count("noticia") == 1

    def test_repeated_matches_counted(self):
        matcher = build_matcher(Category.MATHEMATICAL, ["mais"])
        assert matcher.count(normalize("mais mais mais")) == 3

    def test_keyword_normalizing_to_nothing_is_dropped(self):
        matcher = build_matcher(Category.MATHEMATICAL, ["%"])
        assert matcher.single_word_pattern is None
        assert matcher.phrases == ()
        assert matcher.count("50 por cento") == 0

    def test_empty_keyword_list_scores_zero(self):
        matcher = build_matcher(Category.CREATIVE, [])
        assert matcher.single_word_pattern is None
        assert matcher.negative_pattern is None
        assert matcher.count("qualquer coisa") == 0
        assert not matcher.is_negated("qualquer coisa")

    def test_negatives_match_words_and_phrases(self):
        matcher = build_matcher(Category.WEB_SEARCH, ["noticia"], ["crie", "o que é"])
        assert matcher.is_negated("o que e isso")
        assert matcher.is_negated("crie algo")
        assert not matcher.is_negated("o queijo")
        assert not matcher.is_negated("criei")


class TestRegistry:
    """The compiled registry built at startup."""

    def test_has_every_keyword_category(self, registry):
        assert set(registry) == {
            Category.WEB_SEARCH,
            Category.COMPLEX,
            Category.FACTUAL,
            Category.MATHEMATICAL,
            Category.CREATIVE,
        }
        assert Category.SIMPLE not in registry

    def test_negatives_only_where_defined(self, registry):
        assert registry[Category.WEB_SEARCH].negative_pattern is not None
        assert registry[Category.FACTUAL].negative_pattern is not None
        assert registry[Category.COMPLEX].negative_pattern is None

    def test_read_only(self, registry):
        with pytest.raises(TypeError):
            registry[Category.COMPLEX] = registry[Category.CREATIVE]

    def test_custom_keyword_sets(self):
        custom = build_registry({
            Category.CREATIVE: KeywordSet(Category.CREATIVE, ("poema",)),
        })
        assert list(custom) == [Category.CREATIVE]
        result = Scorer(custom).score_all("Escreva um poema")
        assert result.category is Category.CREATIVE


# ═══════════════════════════════════════════════════════════════
# 2. SCORER
# ═══════════════════════════════════════════════════════════════

class TestScore:
    """Per-category scoring."""

    def test_negative_short_circuits_only_its_category(self, registry):
        text = normalize("Crie uma notícia falsa sobre aliens")
        assert score(text, registry[Category.WEB_SEARCH]) == 0.0
        assert score(text, registry[Category.CREATIVE]) == 1.0

    def test_negative_beats_many_positives(self, registry):
        text = normalize("Crie notícias: as últimas notícias de hoje")
        assert registry[Category.WEB_SEARCH].count(text) >= 3
        assert score(text, registry[Category.WEB_SEARCH]) == 0.0

    def test_missing_matcher(self):
        assert score("qualquer coisa", None) == 0.0

    def test_weighted_scores(self, registry):
        result = Scorer(registry).score_all("Calcule e explique a raiz quadrada")
        assert result.scores[Category.MATHEMATICAL] == 3.0
        assert result.scores[Category.COMPLEX] == 2.0
        assert result.category is Category.MATHEMATICAL
        assert result.score == 3.0
        assert result.matched

    def test_factual_is_dampened(self, registry):
        result = Scorer(registry).score_all("Qual a previsão do tempo para amanhã?")
        assert result.scores[Category.FACTUAL] == pytest.approx(1.6)
        assert result.scores[Category.WEB_SEARCH] == 3.0
        assert result.category is Category.WEB_SEARCH

    def test_raw_scores(self, registry):
        result = Scorer(registry).score_all("Qual a previsão do tempo para amanhã?")
        assert result.raw_scores[Category.FACTUAL] == 2.0
        assert result.raw_scores[Category.WEB_SEARCH] == 3.0
        assert set(result.raw_scores) == set(result.scores)

    def test_negation_checked_once_per_category(self, registry):
        calls = []

        class CountingMatcher:
            def __init__(self, matcher):
                self.matcher = matcher

            def is_negated(self, text):
                calls.append(self.matcher.category)
                return self.matcher.is_negated(text)

            def count(self, text):
                return self.matcher.count(text)

        counting = {category: CountingMatcher(m) for category, m in registry.items()}
        result = Scorer(counting).score_all("Crie uma notícia falsa sobre aliens")
        assert result.category is Category.CREATIVE
        assert sorted(calls) == sorted(registry)

    def test_negated_categories_reported(self, registry):
        result = Scorer(registry).score_all("Crie uma notícia falsa sobre aliens")
        assert result.negated == frozenset({Category.WEB_SEARCH, Category.FACTUAL})
        assert result.normalized_text == "crie uma noticia falsa sobre alien"

    def test_no_keywords(self, registry):
        result = Scorer(registry).score_all("Olá, tudo bem?")
        assert result.category is Category.SIMPLE
        assert result.score == 0.0
        assert not result.matched
        assert all(value == 0.0 for value in result.scores.values())

    def test_explanation(self, registry):
        result = Scorer(registry).score_all("Calcule a raiz quadrada de 144")
        assert result.explanation.startswith("Category=mathematical")
        assert "mathematical=3.0" in result.explanation


# ═══════════════════════════════════════════════════════════════
# 3. CATEGORY SELECTOR
# ═══════════════════════════════════════════════════════════════

class TestSelectCategory:
    """Priority order and minimum threshold."""

    def test_priority_order(self):
        assert PRIORITY_ORDER == (
            Category.MATHEMATICAL,
            Category.WEB_SEARCH,
            Category.CREATIVE,
            Category.COMPLEX,
            Category.FACTUAL,
        )
        assert MIN_CATEGORY_SCORE == 1.0

    def test_empty_scores(self):
        assert select_category({}) is Category.SIMPLE

    def test_below_threshold(self):
        assert select_category({Category.COMPLEX: 0.9, Category.FACTUAL: 0.8}) is Category.SIMPLE

    def test_exact_threshold(self):
        assert select_category({Category.COMPLEX: 1.0}) is Category.COMPLEX

    def test_tie_goes_to_higher_priority(self):
        assert select_category({
            Category.COMPLEX: 1.0,
            Category.MATHEMATICAL: 1.0,
        }) is Category.MATHEMATICAL
        assert select_category({
            Category.FACTUAL: 2.0,
            Category.COMPLEX: 2.0,
        }) is Category.COMPLEX

    def test_strictly_higher_score_wins(self):
        assert select_category({
            Category.WEB_SEARCH: 1.0,
            Category.COMPLEX: 3.0,
        }) is Category.COMPLEX

    def test_factual_above_threshold(self):
        assert select_category({Category.FACTUAL: 1.6}) is Category.FACTUAL
