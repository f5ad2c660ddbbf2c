from __future__ import annotations

import re

_WHITESPACE_RUN = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    if not text:
        return ""
    return _WHITESPACE_RUN.sub(" ", text).strip()


def truncate(text: str, limit: int) -> str:
    if not text or limit <= 0:
        return ""
    return text[:limit]
