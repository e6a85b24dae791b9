from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Dict

import yaml

from answer_gate.models.submission import AnswerSubmission, Mode
from answer_gate.prompts import full, minimal, quick
from answer_gate.prompts.messages import NOT_SPECIFIED

_TEMPLATES: Dict[Mode, str] = {
    Mode.QUICK: quick.TEMPLATE,
    Mode.FULL: full.TEMPLATE,
    Mode.MINIMAL: minimal.TEMPLATE,
}


@lru_cache(maxsize=4)
def _load_relevance_examples(path: Path = full.EXAMPLES_PATH) -> Dict[str, Dict[str, str]]:
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict) or len(data) < 2:
        raise ValueError(f"Relevance examples at {path} must map at least two topic categories")
    return data


def render_relevance_examples(path: Path = full.EXAMPLES_PATH) -> str:
    lines = []
    for category in _load_relevance_examples(path).values():
        lines.append(f"* נושא: {category['topic']} | שאלה: {category['question']}")
        lines.append(f"  רלוונטי: \"{category['relevant']}\"")
        lines.append(f"  לא רלוונטי: \"{category['irrelevant']}\"")
    return "\n".join(lines)


def build_prompt(submission: AnswerSubmission, mode: Mode) -> str:
    """Assemble the judgment prompt for one submission.

    Missing optional values are written out as an explicit "not specified"
    placeholder rather than left out.
    """
    scaffold = ", ".join(p.strip() for p in submission.scaffold_points if p and p.strip())
    fields = {
        "topic": submission.topic_name.strip(),
        "question": submission.question.strip(),
        "answer": submission.answer,
        "scaffold": scaffold or NOT_SPECIFIED,
        "example": (submission.example_answer or "").strip() or NOT_SPECIFIED,
    }
    if mode == Mode.FULL:
        fields["relevance_examples"] = render_relevance_examples()
    return _TEMPLATES[mode].format(**fields)
