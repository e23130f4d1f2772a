import json
from datetime import datetime

import httpx
import pytest

from suggestions.providers.http_provider import HttpSuggestionProvider
from suggestions.providers.rule_based_provider import RuleBasedSuggestionProvider
from suggestions.registry import build_provider
from taskmind.models import ContextEntry


def _provider(handler):
    return HttpSuggestionProvider(
        base_url="http://analyzer.local/", transport=httpx.MockTransport(handler)
    )


def test_http_task_suggestions():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"suggestions": ["Reply to Anna"]})

    out = _provider(handler).task_suggestions("Anna asked about the invoice")
    assert out == ["Reply to Anna"]
    assert seen["url"] == "http://analyzer.local/suggestions"
    assert seen["body"] == {"content": "Anna asked about the invoice"}


def test_http_recommendations_send_entries():
    seen = {}

    def handler(request):
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"recommendations": ["A", "B"]})

    entry = ContextEntry(
        id="c1", content="hello", created_at=datetime(2024, 1, 1), keywords=["hello"]
    )
    assert _provider(handler).recommend([entry]) == ["A", "B"]
    assert seen["body"]["contexts"][0]["keywords"] == ["hello"]


def test_http_error_propagates():
    def handler(request):
        return httpx.Response(503)

    with pytest.raises(httpx.HTTPStatusError):
        _provider(handler).task_suggestions("x")


def test_http_requires_url(monkeypatch):
    monkeypatch.delenv("SUGGESTION_API_URL", raising=False)
    with pytest.raises(RuntimeError):
        HttpSuggestionProvider()


def test_registry(monkeypatch):
    assert isinstance(build_provider("rules"), RuleBasedSuggestionProvider)
    monkeypatch.setenv("SUGGESTION_API_URL", "http://analyzer.local")
    assert isinstance(build_provider("http"), HttpSuggestionProvider)
    with pytest.raises(ValueError):
        build_provider("magic")
