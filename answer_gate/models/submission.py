from __future__ import annotations

from enum import Enum
from typing import Any, List, Mapping, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from answer_gate.errors import InvalidSubmissionError

REQUIRED_FIELDS = ("question", "answer", "topicName")


class Mode(str, Enum):
    """How much the external judgment is asked to return."""

    QUICK = "quick"
    FULL = "full"
    MINIMAL = "minimal"


class AnswerSubmission(BaseModel):
    """A worker's answer to one questionnaire prompt."""

    question: str = Field(..., description="The question shown to the worker")
    answer: str = Field(..., description="The worker's free-text answer")
    topic_name: str = Field(..., alias="topicName", description="Questionnaire topic")
    scaffold_points: List[str] = Field(
        default_factory=list,
        alias="scaffoldPoints",
        description="Sub-topics the question was designed to elicit",
    )
    example_answer: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("exampleAnswer", "example"),
        description="An example of a good answer",
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("question", "answer", "topic_name")
    @classmethod
    def _required_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("scaffold_points", mode="before")
    @classmethod
    def _coerce_scaffold_points(cls, v: Any) -> List[str]:
        """Optional hints never reject a submission: a lone string becomes one
        point, null entries are dropped and other shapes are ignored."""
        if isinstance(v, str):
            v = [v]
        if not isinstance(v, (list, tuple)):
            return []
        return [str(point) for point in v if point is not None]

    @field_validator("example_answer")
    @classmethod
    def _blank_example_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v

    @classmethod
    def from_payload(cls, data: Mapping[str, Any] | None) -> "AnswerSubmission":
        """Validate a raw request body, raising InvalidSubmissionError on failure."""

        if not isinstance(data, Mapping):
            raise InvalidSubmissionError("Missing required fields", {"missing": list(REQUIRED_FIELDS)})
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            fields = sorted({str(err["loc"][0]) for err in exc.errors() if err.get("loc")})
            raise InvalidSubmissionError("Missing required fields", {"invalid": fields}) from exc
