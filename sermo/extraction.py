"""
Extraction of JSON values embedded in free-form text.

LLM completions often wrap the JSON a caller asked for in prose or markdown
fences. The helpers here locate the first JSON value of the requested kind and
deserialize it, returning None instead of raising when nothing usable is found.

Usage:
    from sermo.extraction import extract_json, extract_json_flexible

    extract_json('Sure! {"a": 1} Anything else?', is_object=True)
    # -> {"a": 1}
    extract_json_flexible("The answer is 42.", int)
    # -> 42

Known limitation: the bracket scan counts delimiters without tracking string
literals, so a "{" or "}" inside a quoted value shifts the match. Such input
yields a truncated candidate that usually fails to parse, giving None.
"""

import re
from typing import Any, Optional

from pydantic import TypeAdapter, ValidationError
from pydantic_core import from_json

_STRING_RE = re.compile(r'"([^"\\]|\\[\s\S])*"')
_SCALAR_RE = re.compile(r"\b(true|false|null|-?\d+(\.\d+)?([eE][+-]?\d+)?)\b")


def _deserialize(candidate: str, target: Any) -> Optional[Any]:
    """Strictly decode candidate as target; None on any mismatch."""
    try:
        # NaN and Infinity are not JSON.
        from_json(candidate, allow_inf_nan=False)
    except ValueError:
        return None
    try:
        return TypeAdapter(Any if target is None else target).validate_json(candidate, strict=True)
    except ValidationError:
        return None


def find_balanced(text: str, open_char: str, close_char: str) -> Optional[str]:
    """
    Return the substring from the first open_char to its matching close_char.

    Depth goes up on every open_char and down on every close_char; the match
    ends where depth returns to zero. Returns None when open_char is absent or
    the text ends first.
    """
    start = text.find(open_char)
    if start == -1:
        return None

    depth = 0
    for i in range(start, len(text)):
        c = text[i]
        if c == open_char:
            depth += 1
        elif c == close_char:
            depth -= 1
            if depth == 0:
                return text[start:i + 1]
    return None


def extract_json(text: str, is_object: bool, target: Any = None) -> Optional[Any]:
    """
    Extract the first balanced JSON object or array from text.

    Args:
        text: Arbitrary text to scan.
        is_object: Look for {...} when True, [...] when False.
        target: Type to deserialize into (anything pydantic.TypeAdapter
            accepts). None returns plain JSON values.

    Returns:
        The deserialized value, or None if no balanced candidate exists or it
        does not decode as target.
    """
    open_char, close_char = ("{", "}") if is_object else ("[", "]")
    candidate = find_balanced(text, open_char, close_char)
    if candidate is None:
        return None
    return _deserialize(candidate, target)


def extract_json_flexible(text: str, target: Any = None) -> Optional[Any]:
    """
    Extract the first JSON value of any shape from text.

    Tries, in order: an object, an array, the first double-quoted string
    literal, the first bare scalar (true, false, null or a number). The first
    candidate that decodes as target wins.

    Args:
        text: Arbitrary text to scan.
        target: Type to deserialize into; None returns plain JSON values.

    Returns:
        The deserialized value, or None if every attempt fails.
    """
    for is_object in (True, False):
        value = extract_json(text, is_object, target)
        if value is not None:
            return value

    for pattern in (_STRING_RE, _SCALAR_RE):
        match = pattern.search(text)
        if match:
            value = _deserialize(match.group(0), target)
            if value is not None:
                return value

    return None
