from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple

from answer_gate.models.verdict import Verdict
from answer_gate.prompts.messages import GIBBERISH_FEEDBACK

logger = logging.getLogger(__name__)

# --- Regex Patterns ---
# Every pattern is anchored at both ends so it never fires on a long answer
# that merely starts with one of these tokens.
_PATTERNS: List[Tuple[str, re.Pattern[str]]] = [
    ("short_hebrew", re.compile(r"^[א-ת]{1,4}$")),
    ("short_latin", re.compile(r"^[a-z]{1,5}$", re.IGNORECASE)),
    ("digits_only", re.compile(r"^[\d\s]+$")),
    ("repeated_chars", re.compile(r"^(.{1,3})\1{3,}$", re.DOTALL)),
    (
        "placeholder",
        re.compile(r"^(?:(?:בדיקה|טסט|test|asdf|qwer|123)[\s.,!?]*)+$", re.IGNORECASE),
    ),
    ("filler", re.compile(r"^(?:גגג|ההה|ווו|חחח|ממם)+$")),
    (
        "dont_know",
        re.compile(
            r"^(?:לא יודעת|לא יודע|אין לי מושג|i don'?t know|don'?t know|idk)[\s.!]*$",
            re.IGNORECASE,
        ),
    ),
]


def match_pattern(answer: str) -> Optional[str]:
    """Return the name of the first prefilter pattern matching the answer."""
    text = (answer or "").strip()
    for name, pattern in _PATTERNS:
        if pattern.match(text):
            return name
    return None


def classify(answer: str) -> Optional[Verdict]:
    """Flag obviously useless answers without calling the judgment service.

    Returns a terminal gibberish Verdict on a match, otherwise None.
    """
    name = match_pattern(answer)
    if name is None:
        return None
    logger.info("Prefilter matched pattern %s", name)
    return Verdict(
        is_gibberish=True,
        has_content=False,
        completeness="none",
        feedback=GIBBERISH_FEEDBACK,
    )
