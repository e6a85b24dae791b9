from __future__ import annotations

import logging
import time
from typing import Any, Dict, Mapping, Optional

from answer_gate.config import get_settings
from answer_gate.errors import JudgmentUnavailableError
from answer_gate.llm.openai_client import OpenAIClient
from answer_gate.models.decision import Accepted, Decision, NeedsReview
from answer_gate.models.submission import AnswerSubmission, Mode
from answer_gate.models.verdict import Verdict
from answer_gate.monitoring.metrics import (
    observe_judgment_latency,
    record_decision,
    record_judgment_failure,
    record_prefilter_hit,
)
from answer_gate.monitoring.trace import trace_event
from answer_gate.pipeline.stage01_prefilter import classify
from answer_gate.pipeline.stage02_prompt import build_prompt
from answer_gate.pipeline.stage03_normalize import normalize
from answer_gate.pipeline.stage04_policy import decide
from answer_gate.pipeline.stage05_response import GateResponse, to_response

logger = logging.getLogger(__name__)

openai_client = OpenAIClient()


# Free-text fields from the judgment often quote the answer; traces keep flags only.
def _verdict_summary(verdict: Verdict) -> Dict[str, Any]:
    return {
        "is_gibberish": verdict.is_gibberish,
        "is_relevant": verdict.is_relevant,
        "has_content": verdict.has_content,
        "completeness": verdict.completeness,
        "missing_points": len(verdict.missing_points),
        "has_followup": verdict.followup_question is not None,
    }


def _decision_summary(decision: Decision) -> Dict[str, Any]:
    summary: Dict[str, Any] = {"kind": decision.kind}
    for name in ("completeness", "is_gibberish", "reason"):
        value = getattr(decision, name, None)
        if value is not None:
            summary[name] = value
    if isinstance(decision, Accepted):
        summary["has_followup"] = decision.needs_followup
    return summary


async def _judge(submission: AnswerSubmission, mode: Mode, client: OpenAIClient) -> Decision:
    """Ask the judgment service once and turn its reply into a decision."""

    prompt = build_prompt(submission, mode)
    start = time.perf_counter()
    try:
        raw = await client.judge(prompt)
    except JudgmentUnavailableError as exc:
        logger.warning("Judgment unavailable (%s): %s", mode.value, exc.message)
        record_judgment_failure(mode.value, "unavailable")
        return NeedsReview(reason="unavailable")
    except Exception:  # noqa: BLE001
        logger.exception("Unexpected error from judgment call (%s)", mode.value)
        record_judgment_failure(mode.value, "unavailable")
        return NeedsReview(reason="unavailable")
    observe_judgment_latency(mode.value, time.perf_counter() - start)

    result = normalize(raw, mode)
    if isinstance(result, NeedsReview):
        record_judgment_failure(mode.value, "malformed")
        return result
    trace_event("judge", "verdict", _verdict_summary(result), meta={"mode": mode.value, "reply_chars": len(raw)})
    return decide(result)


async def evaluate(
    submission: AnswerSubmission,
    *,
    mode: Mode = Mode.QUICK,
    client: Optional[OpenAIClient] = None,
) -> Decision:
    """Prefilter → judgment → normalize → policy, for one submission.

    Issues at most one judgment call and never raises for judgment failures.
    """
    mode = Mode(mode)
    verdict = classify(submission.answer)
    if verdict is not None:
        record_prefilter_hit(mode.value)
        decision = decide(verdict)
    else:
        decision = await _judge(submission, mode, client or openai_client)

    record_decision(mode.value, decision.kind)
    trace_event("decision", decision.kind, _decision_summary(decision), meta={"mode": mode.value})
    return decision


async def run_turn(
    payload: Mapping[str, Any] | None,
    *,
    mode: Mode | str | None = None,
    client: Optional[OpenAIClient] = None,
) -> GateResponse:
    """Validate a raw submission and return the caller-facing response.

    Raises InvalidSubmissionError when a required field is missing; every
    other failure resolves to a soft response.
    """
    submission = AnswerSubmission.from_payload(payload)
    resolved = Mode(mode or get_settings().gate_default_mode)
    decision = await evaluate(submission, mode=resolved, client=client)
    return to_response(decision, resolved)
