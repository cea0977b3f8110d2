# export.py
"""Download formats for an analysis result (JSON document, Field/Value CSV)."""

import csv
import io
import json

from models import AnalysisResult

EXPORT_FORMATS = ("json", "csv")


def to_json(result: AnalysisResult, indent=2) -> str:
    return json.dumps(result.to_dict(), indent=indent)


def csv_rows(result: AnalysisResult):
    details = result.detailed_analysis
    return [
        ("Field", "Value"),
        ("Overall Score", f"{result.overall_score}%"),
        ("Sentiment Score", f"{result.sentiment_score}%"),
        ("Sentiment Label", result.sentiment_label.value),
        ("Clarity Score", f"{result.clarity_score}%"),
        ("Engagement Score", f"{result.engagement_score}%"),
        ("Speaking Pace", f"{result.speaking_pace} WPM"),
        ("Question Relevance", f"{result.question_relevance_score}%"),
        ("Word Count", details.word_count),
        ("Question Count", details.question_count),
        ("Key Topics", "; ".join(result.key_topics)),
    ]


def to_csv(result: AnalysisResult) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerows(csv_rows(result))
    return buffer.getvalue()


def export(result: AnalysisResult, fmt: str):
    """Return (body, mimetype) for one of EXPORT_FORMATS."""
    if fmt == "json":
        return to_json(result), "application/json"
    if fmt == "csv":
        return to_csv(result), "text/csv"
    raise ValueError(f"Unsupported export format: {fmt!r}")
