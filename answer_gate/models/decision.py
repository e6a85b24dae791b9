from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from answer_gate.models.verdict import Completeness


class RejectedIrrelevant(BaseModel):
    """The answer does not address the question."""

    kind: Literal["rejected_irrelevant"] = "rejected_irrelevant"
    message: str
    feedback: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)


class RejectedEmpty(BaseModel):
    """The answer carries no usable content."""

    kind: Literal["rejected_empty"] = "rejected_empty"
    message: str = Field(..., min_length=1)
    is_gibberish: bool = False

    model_config = ConfigDict(frozen=True)


class Accepted(BaseModel):
    """The answer is usable; a follow-up may be attached."""

    kind: Literal["accepted"] = "accepted"
    completeness: Optional[Completeness] = None
    feedback: str = Field(..., min_length=1)
    followup: Optional[str] = None
    missing_points: List[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def needs_followup(self) -> bool:
        return self.followup is not None


class NeedsReview(BaseModel):
    """No reliable judgment could be obtained for the answer."""

    kind: Literal["needs_review"] = "needs_review"
    reason: Literal["unavailable", "malformed"] = "malformed"

    model_config = ConfigDict(frozen=True)


Decision = Annotated[
    Union[RejectedIrrelevant, RejectedEmpty, Accepted, NeedsReview],
    Field(discriminator="kind"),
]
