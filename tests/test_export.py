"""Tests for the JSON and CSV export formats."""

import csv
import io
import json

import pytest

from export import export, to_csv, to_json
from models import AnalysisResult
from scoring import analyze


def test_to_json_round_trips():
    result = analyze("What do you think? We believe it works. It really does.")

    assert AnalysisResult.from_dict(json.loads(to_json(result))) == result


def test_to_csv_field_value_rows():
    result = analyze("")
    rows = list(csv.reader(io.StringIO(to_csv(result))))

    assert rows[0] == ["Field", "Value"]
    fields = dict(rows[1:])
    assert fields["Overall Score"] == "25%"
    assert fields["Sentiment Label"] == "Neutral"
    assert fields["Speaking Pace"] == "0 WPM"
    assert fields["Question Relevance"] == "75%"
    assert fields["Word Count"] == "0"
    assert fields["Key Topics"] == ""


def test_to_csv_quotes_every_value():
    first_line = to_csv(analyze("")).splitlines()[0]
    assert first_line == '"Field","Value"'


def test_to_csv_joins_topics():
    result = analyze("Our marketing strategy needs attention.")
    fields = dict(list(csv.reader(io.StringIO(to_csv(result))))[1:])

    assert fields["Key Topics"] == "; ".join(result.key_topics)


@pytest.mark.parametrize("fmt, mimetype", [("json", "application/json"), ("csv", "text/csv")])
def test_export_dispatch(fmt, mimetype):
    body, returned = export(analyze("Hello there."), fmt)

    assert returned == mimetype
    assert body


def test_export_rejects_unknown_format():
    with pytest.raises(ValueError):
        export(analyze(""), "pdf")
