import os
from typing import Optional

from suggestions.providers.base import SuggestionProvider
from suggestions.providers.http_provider import HttpSuggestionProvider
from suggestions.providers.rule_based_provider import RuleBasedSuggestionProvider


def build_provider(name: Optional[str] = None) -> SuggestionProvider:
    """Pick a provider by name, falling back to ``SUGGESTION_PROVIDER``."""
    name = (name or os.getenv("SUGGESTION_PROVIDER", "rules")).strip().lower()
    if name == "rules":
        return RuleBasedSuggestionProvider()
    if name == "http":
        return HttpSuggestionProvider()
    raise ValueError(f"Unknown suggestion provider: {name!r}")
