import json

import pytest

from siftcheck.normalize import DEFAULT_RATING, default_report, extract_json_object, normalize_reply

from .conftest import REPORT


def test_extract_json_object_from_fenced_reply() -> None:
    text = "Here is my analysis:\n```json\n" + json.dumps(REPORT, indent=2) + "\n```\nHope this helps."
    assert extract_json_object(text) == REPORT


def test_extract_json_object_tolerates_raw_newlines_in_strings() -> None:
    text = '{"final_advice": "line one\nline two"}'
    assert extract_json_object(text) == {"final_advice": "line one\nline two"}


def test_extract_json_object_returns_none_for_prose_and_bad_json() -> None:
    assert extract_json_object("The claim is not supported by evidence.") is None
    assert extract_json_object("") is None
    assert extract_json_object(None) is None
    assert extract_json_object("} backwards {") is None
    assert extract_json_object("{stop: unquoted keys}") is None


def test_extract_json_object_spans_first_to_last_brace() -> None:
    # two separate objects make the span invalid JSON
    assert extract_json_object('{"a": 1} and {"b": 2}') is None


def test_default_report_is_deterministic_per_source() -> None:
    first = default_report("some prose", "AnonymousBlogXYZ")
    second = default_report("completely different prose", "AnonymousBlogXYZ")
    assert first == second
    assert first["credibility_rating"] == DEFAULT_RATING
    assert '"AnonymousBlogXYZ"' in first["sift_analysis"]["investigate_source"]
    assert set(first["sift_analysis"]) == {"stop", "investigate_source", "find_coverage", "trace_claims"}


def test_default_report_without_source() -> None:
    report = default_report(None, "")
    assert "this source" in report["sift_analysis"]["investigate_source"]


def test_normalize_reply_uses_parsed_report_and_echoes_input() -> None:
    reply = "Result: " + json.dumps(dict(REPORT, content="model rewrote this", source="model source"))
    report = normalize_reply(reply, "Vaccines cause magnetism", "AnonymousBlogXYZ")

    assert report["credibility_rating"] == "Suspected Fake"
    assert report["sift_analysis"] == REPORT["sift_analysis"]
    assert report["content"] == "Vaccines cause magnetism"
    assert report["source"] == "AnonymousBlogXYZ"


def test_normalize_reply_keeps_extra_model_fields() -> None:
    reply = json.dumps(dict(REPORT, confidence=0.8))
    report = normalize_reply(reply, "c", "s")
    assert report["confidence"] == 0.8


def test_normalize_reply_falls_back_on_prose() -> None:
    report = normalize_reply("I think this is probably false.", "Vaccines cause magnetism", "AnonymousBlogXYZ")

    expected = dict(default_report(None, "AnonymousBlogXYZ"), content="Vaccines cause magnetism", source="AnonymousBlogXYZ")
    assert report == expected


def test_normalize_reply_falls_back_on_incomplete_report() -> None:
    partial = {"credibility_rating": "Highly Credible", "sift_analysis": {"stop": "fine"}}
    report = normalize_reply(json.dumps(partial), "c", "s")
    assert report["credibility_rating"] == DEFAULT_RATING
    assert report["final_advice"] == default_report(None, "s")["final_advice"]


def test_normalize_reply_falls_back_on_wrong_field_types() -> None:
    bad = dict(REPORT, final_advice=["do not share", "verify"])
    report = normalize_reply(json.dumps(bad), "c", "s")
    assert report["credibility_rating"] == DEFAULT_RATING


def test_normalize_reply_ignores_model_values_for_echoed_fields() -> None:
    reply = json.dumps(dict(REPORT, content=None, source=123))
    report = normalize_reply(reply, "claim", "src")
    assert report["credibility_rating"] == "Suspected Fake"
    assert (report["content"], report["source"]) == ("claim", "src")


def test_extract_json_object_survives_deeply_nested_reply() -> None:
    text = '{"a": ' + "[" * 100000 + "]" * 100000 + "}"
    assert extract_json_object(text) is None


@pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
def test_extract_json_object_rejects_non_standard_constants(constant) -> None:
    text = json.dumps(REPORT)[:-1] + f', "confidence": {constant}}}'
    assert extract_json_object(text) is None


def test_normalize_reply_falls_back_when_report_carries_nan() -> None:
    reply = json.dumps(REPORT)[:-1] + ', "confidence": NaN}'
    report = normalize_reply(reply, "c", "s")
    assert report == dict(default_report(None, "s"), content="c", source="s")
    json.dumps(report, allow_nan=False)
