from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from answer_gate.models.decision import Accepted, Decision, NeedsReview, RejectedEmpty, RejectedIrrelevant
from answer_gate.models.submission import Mode
from answer_gate.prompts.messages import THANKS_FEEDBACK


class GateResponse(BaseModel):
    """Caller-facing result. Serialized with camelCase keys, absent fields omitted."""

    is_gibberish: bool = False
    is_relevant: Optional[bool] = None
    accepted: Optional[bool] = None
    needs_followup: bool = False
    needs_review: Optional[bool] = None
    completeness: Optional[str] = None
    followup_question: Optional[str] = None
    follow_up: Optional[str] = Field(None, description="Minimal mode follow-up question")
    missing_points: Optional[List[str]] = None
    reason: Optional[str] = None
    feedback: str = Field(..., min_length=1)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


def to_response(decision: Decision, mode: Mode = Mode.QUICK) -> GateResponse:
    """Map every decision variant to the caller-facing shape."""

    if isinstance(decision, RejectedIrrelevant):
        return GateResponse(
            is_relevant=False,
            accepted=False,
            reason=decision.message,
            feedback=decision.feedback,
        )

    if isinstance(decision, RejectedEmpty):
        return GateResponse(
            is_gibberish=decision.is_gibberish,
            accepted=False,
            feedback=decision.message,
        )

    if isinstance(decision, Accepted):
        followup_key = "follow_up" if mode == Mode.MINIMAL else "followup_question"
        return GateResponse(
            is_relevant=True,
            accepted=True,
            needs_followup=decision.needs_followup,
            completeness=decision.completeness,
            missing_points=decision.missing_points or None,
            feedback=decision.feedback,
            **{followup_key: decision.followup},
        )

    if isinstance(decision, NeedsReview):
        return GateResponse(needs_review=True, feedback=THANKS_FEEDBACK)

    raise TypeError(f"Unknown decision type: {type(decision).__name__}")
