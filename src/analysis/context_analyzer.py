from __future__ import annotations

import logging
from typing import Optional

from heuristics.text_heuristics import (
    DEFAULT_LEXICONS,
    Lexicons,
    count_matches,
    is_stopword,
)
from suggestions.providers.base import SuggestionProvider
from suggestions.providers.rule_based_provider import RuleBasedSuggestionProvider
from taskmind.models import MAX_KEYWORDS, ContextAnalysis, ContextAnalysisRequest, Sentiment

logger = logging.getLogger(__name__)

MIN_KEYWORD_LENGTH = 4
INSIGHT_KEYWORDS = 3


class ContextAnalyzer:
    """Sentiment, keywords and follow-up suggestions for one free-text note."""

    def __init__(
        self,
        provider: Optional[SuggestionProvider] = None,
        lexicons: Lexicons = DEFAULT_LEXICONS,
    ):
        self.provider = provider or RuleBasedSuggestionProvider()
        self.lexicons = lexicons

    def sentiment(self, content: str) -> Sentiment:
        positive = count_matches(content, self.lexicons.positive)
        negative = count_matches(content, self.lexicons.negative)
        if positive > negative:
            return "positive"
        if negative > positive:
            return "negative"
        return "neutral"

    def keywords(self, content: str) -> list[str]:
        # first five survivors in order; no dedup, no ranking
        out = []
        for token in content.split():
            if len(token) < MIN_KEYWORD_LENGTH or is_stopword(token, self.lexicons.stopwords):
                continue
            out.append(token)
            if len(out) == MAX_KEYWORDS:
                break
        return out

    def analyze(self, request: ContextAnalysisRequest) -> ContextAnalysis:
        content = request.content
        sentiment = self.sentiment(content)
        keywords = self.keywords(content)
        insights = (
            f"Content analysis suggests {sentiment} sentiment. "
            f"Key themes identified around {', '.join(keywords[:INSIGHT_KEYWORDS])}."
        )
        suggestions = self.provider.task_suggestions(content)

        logger.debug(f"Context analyzed: sentiment={sentiment} keywords={keywords}")
        return ContextAnalysis(
            keywords=keywords,
            sentiment=sentiment,
            insights=insights,
            task_suggestions=suggestions,
        )
