"""Heuristic number and text extraction from free-text record fields.

Job postings carry numbers embedded in prose ("3-5 years", "6-10 LPA") and
candidate durations arrive as either numbers or strings ("4", "2 years").
None of these helpers raise: anything unparseable reads as 0 or "".
"""

import math
import re

_INT_RE = re.compile(r"\d+")
_LEADING_INT_RE = re.compile(r"^[+-]?\d+")


def normalize(text: str | None) -> str:
    """Lowercase only, surrounding whitespace is kept; None becomes ""."""
    return (text or "").lower()


def first_int(text: str | None) -> int:
    """First run of digits in *text*, e.g. "3-5 years" -> 3. Missing -> 0."""
    if not text:
        return 0
    match = _INT_RE.search(text)
    return int(match.group(0)) if match else 0


def all_ints(text: str | None) -> list[int]:
    """Every run of digits in *text*, in order of appearance."""
    if not text:
        return []
    return [int(n) for n in _INT_RE.findall(text)]


def last_int(text: str | None) -> int:
    """Last run of digits in *text*, e.g. "6-10 LPA" -> 10. Missing -> 0."""
    numbers = all_ints(text)
    return numbers[-1] if numbers else 0


def leading_int(value: str | int | float | None) -> int:
    """Integer prefix of *value*: 4 -> 4, 2.9 -> 2, "3 years" -> 3, "abc" -> 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        return int(value)
    match = _LEADING_INT_RE.match(str(value).strip())
    return int(match.group(0)) if match else 0


def split_tokens(text: str | None, sep: str = ",") -> list[str]:
    """Split *text* on *sep* into lowercased, trimmed tokens.

    Empty positions stay in the list ("a,,b" has three tokens); only an
    empty or missing *text* gives no tokens at all.
    """
    if not text:
        return []
    return [part.strip() for part in text.lower().split(sep)]
