from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from answer_gate.models.decision import NeedsReview
from answer_gate.models.submission import Mode
from answer_gate.models.verdict import COMPLETENESS_LEVELS, Verdict
from answer_gate.prompts.messages import DEFAULT_FEEDBACK, THANKS_FEEDBACK
from answer_gate.prompts.minimal import MAX_FOLLOWUP_LEN, OK_SENTINEL
from answer_gate.utils.json_utils import extract_json_object

logger = logging.getLogger(__name__)

_NULL_WORDS = {"null", "none"}


def _text_or_none(value: Any) -> Optional[str]:
    if not isinstance(value, str) or not value.strip():
        return None
    if value.strip().lower() in _NULL_WORDS:
        return None
    return value


def _completeness(value: Any, has_content: bool) -> Optional[str]:
    if value is None:
        return None if has_content else "none"
    if isinstance(value, str) and value.strip().lower() in COMPLETENESS_LEVELS:
        return value.strip().lower()
    logger.warning("Ignoring unknown completeness value %r", value)
    return None if has_content else "none"


def _missing_points(value: Any) -> List[str]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        return []
    return [str(p) for p in value if p is not None and str(p).strip()]


def verdict_from_judgment(data: Dict[str, Any]) -> Verdict:
    """Apply field-level defaults to a parsed judgment object."""

    has_content = data.get("hasContent") is not False
    return Verdict(
        is_gibberish=data.get("isGibberish") is True,
        is_relevant=data.get("isRelevant") is not False,
        relevance_reason=_text_or_none(data.get("relevanceReason")),
        has_content=has_content,
        completeness=_completeness(data.get("completeness"), has_content),
        missing_points=_missing_points(data.get("missingPoints")),
        feedback=_text_or_none(data.get("feedback")) or DEFAULT_FEEDBACK,
        followup_question=_text_or_none(data.get("followupQuestion")),
    )


def normalize_minimal(raw_text: str) -> Verdict:
    """Read a plain-text follow-up reply.

    The reply is either a short question or the literal OK sentinel. An exact
    OK, an empty reply, or anything longer than MAX_FOLLOWUP_LEN suppresses the
    follow-up.
    """
    text = (raw_text or "").strip()
    if text == OK_SENTINEL:
        return Verdict(completeness="high", feedback=THANKS_FEEDBACK)
    if not text or len(text) > MAX_FOLLOWUP_LEN:
        logger.info("Minimal judgment reply suppressed (%d chars)", len(text))
        return Verdict(feedback=THANKS_FEEDBACK)
    return Verdict(completeness="medium", feedback=THANKS_FEEDBACK, followup_question=text)


def normalize(raw_text: str, mode: Mode) -> Union[Verdict, NeedsReview]:
    """Turn the raw judgment reply into a Verdict, or NeedsReview if unreadable.

    Never raises: anything that cannot be read as a judgment object becomes
    NeedsReview(reason="malformed").
    """
    if mode == Mode.MINIMAL:
        return normalize_minimal(raw_text)

    data = extract_json_object(raw_text)
    if data is None:
        logger.warning("No JSON object found in judgment reply (%d chars)", len(raw_text or ""))
        return NeedsReview(reason="malformed")
    try:
        return verdict_from_judgment(data)
    except ValidationError as exc:
        logger.warning("Judgment object failed validation: %s", exc)
        return NeedsReview(reason="malformed")
