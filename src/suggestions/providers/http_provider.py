from __future__ import annotations

import logging
import os
from typing import Optional, Sequence

import httpx

from suggestions.schemas import RecommendationsReply, SuggestionsReply
from taskmind.models import ContextEntry

logger = logging.getLogger(__name__)


class HttpSuggestionProvider:
    """Delegates suggestions to a remote analyzer service over JSON/HTTP.

    Transport and validation errors are not swallowed; the caller decides
    how to present them.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout_s: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = (base_url or os.getenv("SUGGESTION_API_URL", "")).strip().rstrip("/")
        self.api_key = (api_key or os.getenv("SUGGESTION_API_KEY", "")).strip()
        self.timeout_s = timeout_s if timeout_s is not None else float(
            os.getenv("SUGGESTION_TIMEOUT_S", "10")
        )
        self._transport = transport

        if not self.base_url:
            raise RuntimeError("SUGGESTION_API_URL is missing")

    def _post(self, path: str, payload: dict) -> dict:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        url = f"{self.base_url}{path}"
        with httpx.Client(timeout=self.timeout_s, transport=self._transport) as client:
            try:
                r = client.post(url, headers=headers, json=payload)
                r.raise_for_status()
            except httpx.HTTPError as e:
                logger.warning(f"Suggestion service call to {url} failed: {e}")
                raise
            return r.json()

    def task_suggestions(self, content: str) -> list[str]:
        data = self._post("/suggestions", {"content": content})
        return SuggestionsReply.model_validate(data).suggestions

    def recommend(self, entries: Sequence[ContextEntry]) -> list[str]:
        payload = {
            "contexts": [
                {
                    "content": e.content,
                    "source_type": e.source_type,
                    "keywords": e.keywords,
                    "sentiment": e.sentiment,
                }
                for e in entries
            ]
        }
        data = self._post("/recommendations", payload)
        return RecommendationsReply.model_validate(data).recommendations
