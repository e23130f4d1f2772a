from __future__ import annotations

from typing import Optional, Sequence

from suggestions.providers.base import SuggestionProvider
from suggestions.providers.rule_based_provider import RuleBasedSuggestionProvider
from taskmind.models import ContextEntry


class RecommendationEngine:
    """Suggested task titles drawn from the stored context entries.

    The provider decides how (or whether) the entries are consulted.
    """

    def __init__(self, provider: Optional[SuggestionProvider] = None):
        self.provider = provider or RuleBasedSuggestionProvider()

    def recommend(self, entries: Sequence[ContextEntry]) -> list[str]:
        return self.provider.recommend(entries)
