"""
Answer checking for code challenges.

This is a textual heuristic, not a semantic check: a submission passes when,
after normalization, it equals or contains the stored solution.
"""

from __future__ import annotations

import re

_LINE_COMMENT = re.compile(r"//.*$", re.MULTILINE)
_WHITESPACE = re.compile(r"\s+")
_SPACE_AROUND_PUNCTUATION = re.compile(r" ?([(){}\[\];,=<>+\-*/.!&|?:]) ?")


def normalize_code(code: str) -> str:
    """Strip // comments, collapse whitespace runs to one space and trim."""
    code = _LINE_COMMENT.sub("", code)
    code = _WHITESPACE.sub(" ", code)
    return code.strip()


def _compact(normalized: str) -> str:
    # "for ($i = 0)" and "for($i=0)" compare equal.
    return _SPACE_AROUND_PUNCTUATION.sub(r"\1", normalized)


def check_answer(submission: str, solution: str) -> bool:
    user_code = _compact(normalize_code(submission))
    expected = _compact(normalize_code(solution))
    return user_code == expected or expected in user_code
