from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

_FENCE_OPEN = re.compile(r"^```(?:json)?\s*\n?")
_FENCE_CLOSE = re.compile(r"\n?```\s*$")
_ARRAY = re.compile(r"\[[\s\S]*\]")
_OBJECT = re.compile(r"\{[\s\S]*\}")


def _lessons_of(parsed: Any) -> List[Dict[str, Any]] | None:
    if isinstance(parsed, dict) and isinstance(parsed.get("lessons"), list):
        return parsed["lessons"]
    if isinstance(parsed, list):
        return parsed
    return None


def parse_proposals(text: str) -> List[Dict[str, Any]]:
    """Raw candidate lessons from an external generator's reply.

    Accepts ``{"lessons": [...]}`` or a bare list, optionally wrapped in a
    markdown code fence, or the first JSON array/object embedded in prose.
    Anything else yields ``[]``; the caller decides what an empty proposal means.
    """
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = _FENCE_CLOSE.sub("", _FENCE_OPEN.sub("", cleaned))

    try:
        found = _lessons_of(json.loads(cleaned))
        return found if found is not None else []
    except json.JSONDecodeError:
        pass

    m = _ARRAY.search(cleaned)
    if m:
        try:
            parsed = json.loads(m.group(0))
            if isinstance(parsed, list):
                return parsed
        except json.JSONDecodeError:
            pass
    m = _OBJECT.search(cleaned)
    if m:
        try:
            parsed = json.loads(m.group(0))
            if isinstance(parsed, dict) and isinstance(parsed.get("lessons"), list):
                return parsed["lessons"]
        except json.JSONDecodeError:
            pass
    logger.warning("Could not find a lesson list in proposal text")
    return []
