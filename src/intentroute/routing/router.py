"""Route resolution.

Maps a selected category plus a configuration snapshot to a concrete
route: which model to call, whether to enable managed web search, and
which reasoning effort to request.

Rules:
- A per-category model override in the snapshot wins over the tier default
- Complex and creative go to the premium model, everything else to the
  standard model
- Web search needs a model that supports it; otherwise the route falls
  back to a known-capable model
- Claude models do web search through the alternate search backend, when
  it is enabled
- gpt-5 family models need a minimum reasoning effort for web search

Resolution never fails: every input yields some valid decision.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING

from .categories import Category
from .matcher import MatcherRegistry, build_registry
from .scorer import Scorer

if TYPE_CHECKING:
    from intentroute.config import ConfigSnapshot

logger = logging.getLogger(__name__)


class ReasoningEffort(str, Enum):
    """Reasoning effort levels understood by reasoning models."""
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# Models that support managed web search in the Responses API.
# gpt-4.1-nano and gpt-5-nano do not.
WEB_SEARCH_MODELS: frozenset[str] = frozenset({
    "gpt-4o",
    "gpt-4o-mini",
    "gpt-4o-2024-08-06",
    "chatgpt-4o-latest",
    "gpt-4-turbo",
    "gpt-4.1",
    "gpt-4.1-mini",
    "gpt-5",       # with reasoning
    "gpt-5.1",     # with reasoning
    "gpt-5-pro",   # with reasoning
    "gpt-5-mini",
    "o3",
    "o3-mini",
    "o4-mini",
})

# Used when the configured model can't do web search
WEB_SEARCH_FALLBACK_MODEL = "gpt-4o-mini"

# Claude models search through the alternate backend instead
ALTERNATE_SEARCH_PREFIX = "claude-"

# gpt-5 family needs at least this effort to use web search
REASONING_REQUIRED_PREFIX = "gpt-5"
WEB_SEARCH_MIN_REASONING = ReasoningEffort.MEDIUM

PREMIUM_CATEGORIES = frozenset({Category.COMPLEX, Category.CREATIVE})


@dataclass(frozen=True)
class RouteDecision:
    """The result of routing one utterance."""
    category: Category | str  # raw value only for unrecognized input
    model: str
    web_search: bool
    reasoning_effort: ReasoningEffort | None = None

    # Observability only, routing semantics live in the fields above
    score: float = 0.0
    matched: bool = False
    override_applied: bool = False
    fallback_applied: bool = False

    @property
    def category_value(self) -> str:
        return getattr(self.category, "value", str(self.category))

    def to_dict(self) -> dict[str, object]:
        return {
            "category": self.category_value,
            "model": self.model,
            "web_search": self.web_search,
            "reasoning_effort": (
                self.reasoning_effort.value if self.reasoning_effort else None
            ),
        }


def supports_web_search(model: str) -> bool:
    """Check the static allow-list for managed web search support."""
    return model in WEB_SEARCH_MODELS


def default_model(category: Category, snapshot: "ConfigSnapshot") -> str:
    """Model tier default for a category, ignoring overrides."""
    if category in PREMIUM_CATEGORIES:
        return snapshot.premium_model
    return snapshot.standard_model


def _as_category(category: Category | str) -> Category | None:
    try:
        return Category(category)
    except ValueError:
        return None


def resolve(category: Category | str, snapshot: "ConfigSnapshot") -> RouteDecision:
    """Resolve a category into a RouteDecision.

    Args:
        category: Selected category, as a Category or its string value.
            Unknown values are routed like SIMPLE but kept as given.
        snapshot: Configuration captured by the caller for this request.

    Returns:
        RouteDecision with model, web search flag and reasoning effort.
    """
    known = _as_category(category)
    if known is not None:
        category = known

    override = snapshot.category_model_overrides.get(known.value, "") if known else ""
    override_applied = bool(override)
    model = override if override_applied else default_model(known or Category.SIMPLE, snapshot)

    web_search = known is Category.WEB_SEARCH
    reasoning_effort: ReasoningEffort | None = None
    fallback_applied = False

    if web_search:
        alternate = model.startswith(ALTERNATE_SEARCH_PREFIX)
        if alternate and snapshot.alternate_search_enabled:
            # Search is delegated to the alternate backend, no reasoning config
            pass
        elif not supports_web_search(model):
            model = WEB_SEARCH_FALLBACK_MODEL
            reasoning_effort = None
            fallback_applied = True
        elif model.startswith(REASONING_REQUIRED_PREFIX):
            reasoning_effort = WEB_SEARCH_MIN_REASONING

    return RouteDecision(
        category=category,
        model=model,
        web_search=web_search,
        reasoning_effort=reasoning_effort,
        override_applied=override_applied,
        fallback_applied=fallback_applied,
    )


class IntentRouter:
    """Classifies utterances and resolves them into routes.

    The matcher registry is compiled once (or injected) and never mutated,
    so a single router can be shared by any number of request threads.
    Configuration is passed in per call and never stored.

    Usage:
        router = IntentRouter()
        decision = router.route("Quais as últimas notícias?", store.snapshot())
        # decision.category == Category.WEB_SEARCH
        # decision.web_search is True
    """

    def __init__(self, registry: MatcherRegistry | None = None):
        self.registry = registry if registry is not None else build_registry()
        self.scorer = Scorer(self.registry)

    def route(self, utterance: str, snapshot: "ConfigSnapshot") -> RouteDecision:
        """Classify an utterance and resolve its route.

        Args:
            utterance: Sanitized user text.
            snapshot: Configuration captured by the caller for this request.

        Returns:
            RouteDecision for this utterance.
        """
        scoring = self.scorer.score_all(utterance)
        decision = replace(
            resolve(scoring.category, snapshot),
            score=scoring.score,
            matched=scoring.matched,
        )
        self._log(decision, scoring.explanation)
        return decision

    @staticmethod
    def _log(decision: RouteDecision, explanation: str) -> None:
        category = decision.category_value.upper()
        if decision.matched:
            logger.info(f"Route: {category} (score: {decision.score:.1f}) {explanation}")
        else:
            logger.info(f"Route: {category} (no category matched, using default)")

        if decision.override_applied:
            logger.info(f"Route: {category} using category model override: {decision.model}")

        if decision.fallback_applied:
            logger.warning(
                f"Model does not support web search, using fallback: {decision.model}"
            )
        elif decision.reasoning_effort is not None:
            logger.debug(
                f"{decision.model} with web search: using "
                f"reasoning='{decision.reasoning_effort.value}' (minimum required)"
            )
