from __future__ import annotations

import json
from typing import Any, Dict, Optional


def sanitize_json_content(raw: str) -> str:
    """Strip markdown fences around a reply, keeping the body.

    - Removes leading ``` or ```json fences and trailing backticks.
    - Trims whitespace.
    """
    s = (raw or "").strip()
    if s.startswith("```json"):
        s = s[7:].strip()
        s = s.rstrip("`").strip()
    elif s.startswith("```"):
        s = s[3:].strip()
        s = s.rstrip("`").strip()
    return s


def _balanced_object_end(text: str, start: int) -> int:
    """Return the index just past the `}` closing the `{` at `start`, or -1."""
    depth = 0
    in_string = False
    escape = False
    for i in range(start, len(text)):
        ch = text[i]
        if escape:
            escape = False
            continue
        if ch == "\\" and in_string:
            escape = True
            continue
        if ch == '"':
            in_string = not in_string
            continue
        if in_string:
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i + 1
    return -1


def extract_json_object(raw: str) -> Optional[Dict[str, Any]]:
    """Find the first top-level JSON object embedded in free-form text.

    The candidate span is bracket-balanced and string-aware, so nested objects
    and braces inside string values do not cut it short. A balanced span that
    is not valid JSON is skipped whole, never searched for inner objects; only
    an unbalanced `{` falls through to the next one. Returns None when no span
    parses to a JSON object.
    """
    s = sanitize_json_content(raw)
    start = s.find("{")
    while start != -1:
        end = _balanced_object_end(s, start)
        data = None
        if end != -1:
            try:
                data = json.loads(s[start:end])
            except json.JSONDecodeError:
                data = None
        if isinstance(data, dict):
            return data
        start = s.find("{", end if end != -1 else start + 1)
    return None
