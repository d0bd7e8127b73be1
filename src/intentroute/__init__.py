"""intentroute - Rule-based intent classifier and LLM model router.

Modules:
    - routing: Normalizer, keyword registry, matchers, scorer and resolver
    - config: Configuration snapshots, YAML loading and the runtime store
    - cli: Debugging CLI (route / explain / config)
"""

__version__ = "0.1.0"
