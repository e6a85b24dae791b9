from __future__ import annotations

from answer_gate.models.decision import Accepted, Decision, RejectedEmpty, RejectedIrrelevant
from answer_gate.models.verdict import Verdict
from answer_gate.prompts.messages import (
    EMPTY_ANSWER_FEEDBACK,
    GIBBERISH_FEEDBACK,
    IRRELEVANT_FEEDBACK,
    IRRELEVANT_REASON_FALLBACK,
)

FOLLOWUP_LEVELS = frozenset({"low", "medium"})


def decide(verdict: Verdict) -> Decision:
    """Map a verdict to a decision; the first matching rule wins.

    1. not relevant              -> RejectedIrrelevant
    2. no content / gibberish /
       completeness "none"       -> RejectedEmpty
    3. otherwise                 -> Accepted, with a follow-up only for
                                    low/medium completeness and only when the
                                    judgment supplied a question
    """
    if not verdict.is_relevant:
        return RejectedIrrelevant(
            message=verdict.relevance_reason or IRRELEVANT_REASON_FALLBACK,
            feedback=IRRELEVANT_FEEDBACK,
        )

    if not verdict.has_content or verdict.is_gibberish or verdict.completeness == "none":
        message = GIBBERISH_FEEDBACK if verdict.is_gibberish else EMPTY_ANSWER_FEEDBACK
        return RejectedEmpty(message=message, is_gibberish=verdict.is_gibberish)

    followup = verdict.followup_question if verdict.completeness in FOLLOWUP_LEVELS else None
    return Accepted(
        completeness=verdict.completeness,
        feedback=verdict.feedback,
        followup=followup,
        missing_points=list(verdict.missing_points),
    )
