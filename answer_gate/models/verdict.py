from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

Completeness = Literal["none", "low", "medium", "high"]

COMPLETENESS_LEVELS: tuple[str, ...] = ("none", "low", "medium", "high")


class Verdict(BaseModel):
    """Structured classification of one answer."""

    is_gibberish: bool = False
    is_relevant: bool = True
    relevance_reason: Optional[str] = None
    has_content: bool = True
    completeness: Optional[Completeness] = Field(
        None, description="None when the judgment did not report it"
    )
    missing_points: List[str] = Field(default_factory=list)
    feedback: str = Field(..., min_length=1)
    followup_question: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("followup_question")
    @classmethod
    def _blank_followup_is_absent(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v
