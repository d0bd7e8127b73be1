"""Rule-based intent classification and model routing.

Pipeline (all local, deterministic, no model calls):
- Normalize the utterance (lowercase, strip accents and punctuation, stem)
- Score it against each category's compiled keyword matchers
- Pick one category by fixed priority and a minimum score
- Resolve the category into a model, web search flag and reasoning effort

The keyword matchers are compiled once at startup by build_registry() and
shared read-only. Configuration is passed per call as a snapshot.
"""

from intentroute.routing.categories import Category
from intentroute.routing.matcher import CompiledMatcher, build_matcher, build_registry
from intentroute.routing.normalizer import normalize
from intentroute.routing.router import (
    IntentRouter,
    ReasoningEffort,
    RouteDecision,
    resolve,
)
from intentroute.routing.scorer import Scorer, ScoringResult, select_category

__all__ = [
    "Category",
    "CompiledMatcher",
    "IntentRouter",
    "ReasoningEffort",
    "RouteDecision",
    "Scorer",
    "ScoringResult",
    "build_matcher",
    "build_registry",
    "normalize",
    "resolve",
    "select_category",
]
