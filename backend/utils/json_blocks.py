"""Locate and decode the first JSON object embedded in free-form model output."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional


def find_first_json_object(text: str) -> Optional[str]:
    """Return the first balanced ``{...}`` block in ``text``, or None.

    Braces inside JSON string literals (including escaped quotes) do not count
    towards nesting depth.
    """
    if not text:
        return None
    start = text.find("{")
    if start < 0:
        return None

    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        ch = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[start : index + 1]
    return None


def parse_first_json_object(text: str) -> Dict[str, Any]:
    """Decode the first JSON object in ``text``.

    Raises ValueError when no object is present, the block is not valid JSON,
    or it decodes to something other than an object.
    """
    block = find_first_json_object(text)
    if block is None:
        raise ValueError("No JSON object found in model response")
    try:
        data = json.loads(block)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in model response: {e}") from e
    if not isinstance(data, dict):
        raise ValueError("Model response JSON is not an object")
    return data
