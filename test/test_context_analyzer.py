from analysis.context_analyzer import ContextAnalyzer
from taskmind.models import ContextAnalysisRequest


def _analyze(content, provider=None):
    return ContextAnalyzer(provider=provider).analyze(ContextAnalysisRequest(content=content))


def test_positive_sentiment():
    assert _analyze("This is a great success").sentiment == "positive"


def test_negative_sentiment():
    assert _analyze("There was a problem and a delay").sentiment == "negative"


def test_tie_is_neutral():
    assert _analyze("great work but urgent").sentiment == "neutral"
    assert _analyze("problem problem, good").sentiment == "neutral"


def test_empty_content():
    out = _analyze("")
    assert out.keywords == []
    assert out.sentiment == "neutral"
    assert out.task_suggestions == [
        "Follow up on mentioned topics",
        "Schedule related meetings",
    ]


def test_keywords_first_five_in_order():
    out = _analyze("alpha beta gamma delta epsilon zeta")
    assert out.keywords == ["alpha", "beta", "gamma", "delta", "epsilon"]


def test_keywords_keep_casing_and_duplicates():
    out = _analyze("Quarterly budget and Budget budget")
    assert out.keywords == ["Quarterly", "budget", "Budget", "budget"]


def test_short_tokens_dropped():
    assert _analyze("the cat sat on a mat").keywords == []


def test_insights_name_first_three_keywords():
    out = _analyze("Client meeting went great, contract signed")
    assert out.insights == (
        "Content analysis suggests positive sentiment. "
        "Key themes identified around Client, meeting, went."
    )


def test_suggestions_come_from_provider(fake_provider_factory):
    provider = fake_provider_factory(suggestions=["Email Sarah"])
    assert _analyze("anything", provider=provider).task_suggestions == ["Email Sarah"]
