"""Static keyword registry for the intent classifier.

One module per category holds the raw Portuguese keywords and phrases.
Nothing here is normalized: the matcher compiler runs every entry through
the same normalizer used for user input, so entries can be written with
accents and inflections as a human would type them.
"""

from dataclasses import dataclass

from intentroute.routing.categories import Category
from intentroute.routing.keywords.complex import COMPLEX_KEYWORDS
from intentroute.routing.keywords.creative import CREATIVE_KEYWORDS
from intentroute.routing.keywords.factual import FACTUAL_KEYWORDS
from intentroute.routing.keywords.mathematical import MATHEMATICAL_KEYWORDS
from intentroute.routing.keywords.web_search import WEB_SEARCH_KEYWORDS

# Terms that veto a category outright, to filter predictable false positives
# ("crie uma notícia" is a writing request, not a news lookup).
NEGATIVE_KEYWORDS: dict[Category, tuple[str, ...]] = {
    Category.WEB_SEARCH: (
        "crie", "imagine", "invente", "escreva", "redija", "traduza", "explique", "defina",
        "o que é", "significado", "conceito", "resuma", "sintetize", "analise", "compare",
    ),
    Category.FACTUAL: (
        "crie", "imagine", "invente", "sugira", "recomende", "opinião",
    ),
}


@dataclass(frozen=True)
class KeywordSet:
    """Raw keywords and negative keywords for one category."""
    category: Category
    keywords: tuple[str, ...]
    negatives: tuple[str, ...] = ()


def build_keyword_sets() -> dict[Category, KeywordSet]:
    """Assemble the keyword sets for every keyword-matched category."""
    keywords = {
        Category.WEB_SEARCH: WEB_SEARCH_KEYWORDS,
        Category.COMPLEX: COMPLEX_KEYWORDS,
        Category.FACTUAL: FACTUAL_KEYWORDS,
        Category.MATHEMATICAL: MATHEMATICAL_KEYWORDS,
        Category.CREATIVE: CREATIVE_KEYWORDS,
    }
    return {
        category: KeywordSet(
            category=category,
            keywords=words,
            negatives=NEGATIVE_KEYWORDS.get(category, ()),
        )
        for category, words in keywords.items()
    }


__all__ = [
    "KeywordSet",
    "NEGATIVE_KEYWORDS",
    "build_keyword_sets",
]
