"""Intent categories an utterance can be routed to."""

from enum import Enum


class Category(str, Enum):
    """Routing categories.

    The values double as the keys of ``category_model_overrides`` in the
    configuration file.
    """
    WEB_SEARCH = "web_search"       # Needs fresh information from the web
    COMPLEX = "complex"             # Explanations, analysis, comparisons
    FACTUAL = "factual"             # Who / what / when / where lookups
    MATHEMATICAL = "mathematical"   # Calculations, conversions, math terms
    CREATIVE = "creative"           # Writing, suggestions, opinions
    SIMPLE = "simple"               # Residual: nothing cleared the threshold


# Categories that have keyword lists (SIMPLE is never matched directly)
KEYWORD_CATEGORIES: tuple[Category, ...] = (
    Category.WEB_SEARCH,
    Category.COMPLEX,
    Category.FACTUAL,
    Category.MATHEMATICAL,
    Category.CREATIVE,
)
