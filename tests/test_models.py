"""Serialisation tests for AnalysisResult."""

import json

import pytest

from models import AnalysisResult, InvalidInput, SentimentLabel
from scoring import analyze

SAMPLE = (
    "Good morning everyone! Today we review the quarterly plan with Jane Doe from "
    "Acme Corp. What do you think about the new budget? I believe it is great. "
    "The schedule was delayed, which is bad. We will fix it together."
)


def test_to_dict_has_api_shape():
    data = analyze(SAMPLE).to_dict()

    assert set(data) == {
        "sentimentScore", "sentimentLabel", "keyTopics", "speakingPace",
        "clarityScore", "engagementScore", "questionRelevanceScore",
        "overallScore", "detailedAnalysis",
    }
    assert set(data["detailedAnalysis"]) == {
        "wordCount", "avgWordsPerSentence", "questionCount",
        "positiveWords", "negativeWords", "namedEntities",
    }
    assert isinstance(data["sentimentLabel"], str)
    assert isinstance(data["keyTopics"], list)


def test_json_round_trip_preserves_every_field():
    result = analyze(SAMPLE)

    restored = AnalysisResult.from_dict(json.loads(json.dumps(result.to_dict())))

    assert restored == result
    assert restored.sentiment_label is result.sentiment_label


def test_from_dict_rejects_missing_field():
    data = analyze(SAMPLE).to_dict()
    del data["clarityScore"]

    with pytest.raises(InvalidInput):
        AnalysisResult.from_dict(data)


def test_from_dict_rejects_missing_detail_field():
    data = analyze(SAMPLE).to_dict()
    del data["detailedAnalysis"]["wordCount"]

    with pytest.raises(InvalidInput):
        AnalysisResult.from_dict(data)


def test_from_dict_rejects_unknown_label():
    data = analyze(SAMPLE).to_dict()
    data["sentimentLabel"] = "Ecstatic"

    with pytest.raises(InvalidInput):
        AnalysisResult.from_dict(data)


def test_from_dict_rejects_non_object():
    with pytest.raises(InvalidInput):
        AnalysisResult.from_dict(["not", "a", "dict"])


def test_result_is_immutable():
    result = analyze(SAMPLE)

    with pytest.raises(AttributeError):
        result.overall_score = 0


def test_sentiment_label_values():
    assert [label.value for label in SentimentLabel] == [
        "Very Positive", "Positive", "Neutral", "Negative", "Very Negative",
    ]
