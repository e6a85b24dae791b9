import json

import pytest

from answer_gate.models.decision import NeedsReview
from answer_gate.models.submission import Mode
from answer_gate.models.verdict import Verdict
from answer_gate.pipeline.stage03_normalize import normalize
from answer_gate.prompts.messages import DEFAULT_FEEDBACK


def test_full_object_is_taken_verbatim():
    payload = {
        "isGibberish": False,
        "isRelevant": True,
        "relevanceReason": "describes the inspection routine",
        "hasContent": True,
        "completeness": "medium",
        "missingPoints": ["who signs the log"],
        "feedback": "Great detail on the monthly check!",
        "followupQuestion": "Who signs the inspection log?",
    }
    verdict = normalize(json.dumps(payload), Mode.FULL)
    assert verdict == Verdict(
        is_gibberish=False,
        is_relevant=True,
        relevance_reason="describes the inspection routine",
        has_content=True,
        completeness="medium",
        missing_points=["who signs the log"],
        feedback="Great detail on the monthly check!",
        followup_question="Who signs the inspection log?",
    )


def test_defaults_apply_to_empty_object():
    verdict = normalize("{}", Mode.QUICK)
    assert isinstance(verdict, Verdict)
    assert verdict.is_gibberish is False
    assert verdict.is_relevant is True
    assert verdict.has_content is True
    assert verdict.completeness is None
    assert verdict.missing_points == []
    assert verdict.feedback == DEFAULT_FEEDBACK
    assert verdict.followup_question is None


def test_completeness_defaults_to_none_without_content():
    verdict = normalize('{"hasContent": false}', Mode.FULL)
    assert verdict.has_content is False
    assert verdict.completeness == "none"


def test_only_explicit_false_marks_irrelevant():
    assert normalize('{"isRelevant": null}', Mode.QUICK).is_relevant is True
    assert normalize('{"isRelevant": false}', Mode.QUICK).is_relevant is False


@pytest.mark.parametrize("value", [None, "", "   ", "null"])
def test_blank_followup_is_absent(value):
    verdict = normalize(json.dumps({"completeness": "low", "followupQuestion": value}), Mode.QUICK)
    assert verdict.followup_question is None


def test_blank_feedback_gets_default():
    assert normalize('{"feedback": ""}', Mode.QUICK).feedback == DEFAULT_FEEDBACK


def test_unknown_completeness_is_dropped():
    assert normalize('{"completeness": "partial"}', Mode.QUICK).completeness is None
    assert normalize('{"completeness": "HIGH"}', Mode.QUICK).completeness == "high"


def test_embedded_object_in_prose():
    raw = 'Sure, here is my answer: {"isRelevant": false, "relevanceReason": "talks about lunch"} and nothing else'
    verdict = normalize(raw, Mode.FULL)
    assert verdict.is_relevant is False
    assert verdict.relevance_reason == "talks about lunch"


@pytest.mark.parametrize("raw", ["", "I cannot help with that.", '{"isRelevant": tru', "[1, 2, 3]"])
def test_unreadable_reply_needs_review(raw):
    result = normalize(raw, Mode.QUICK)
    assert isinstance(result, NeedsReview)
    assert result.reason == "malformed"


def test_normalization_is_idempotent():
    raw = '```json\n{"completeness": "low", "followupQuestion": "How often?"}\n```'
    assert normalize(raw, Mode.QUICK) == normalize(raw, Mode.QUICK)


def test_minimal_ok_sentinel_suppresses_followup():
    verdict = normalize("OK", Mode.MINIMAL)
    assert verdict.followup_question is None
    assert normalize("  OK\n", Mode.MINIMAL).followup_question is None


def test_minimal_long_reply_suppresses_followup():
    assert normalize("x" * 61, Mode.MINIMAL).followup_question is None


def test_minimal_short_reply_is_the_followup():
    question = "מי חותם על יומן הבדיקות של המטפים בכל חודש בקומה?".ljust(59, "?")
    assert len(question) == 59
    verdict = normalize(f"  {question}\n", Mode.MINIMAL)
    assert verdict.followup_question == question


def test_minimal_reply_at_ceiling_is_kept():
    assert normalize("y" * 60, Mode.MINIMAL).followup_question == "y" * 60


def test_minimal_mode_does_not_parse_json():
    raw = '{"followupQuestion": "x"}'
    assert normalize(raw, Mode.MINIMAL).followup_question == raw


def test_invalid_outer_object_needs_review_instead_of_inner_fragment():
    raw = '{"isRelevant": false, "relevanceReason": "talks about lunch", "meta": {"score": 1},}'
    result = normalize(raw, Mode.FULL)
    assert isinstance(result, NeedsReview)
    assert result.reason == "malformed"
