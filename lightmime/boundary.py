"""Helpers for locating MIME boundaries and their line breaks."""

from __future__ import annotations

_MARKER = "boundary="
_C_WHITESPACE = " \t\n\v\f\r"


def boundary_linebreak(s: str, linebreak: str) -> str | None:
    """Return ``linebreak`` if it occurs in ``s``, otherwise None."""
    if linebreak in s:
        return linebreak
    return None


def chomp_boundary(s: str, linebreak: str) -> str | None:
    """Return ``s`` cut off before the first ``linebreak``.

    When ``s`` has no line break it is returned unchanged.  When it starts
    with the line break nothing is left, and None is returned.
    """
    offset = s.find(linebreak)
    if offset == -1:
        return s
    if offset > 0:
        return s[:offset]
    return None


def get_boundary(s: str) -> str | None:
    """Extract the ``boundary=`` parameter from a Content-Type value.

    The parameter name is matched case-insensitively; an opening quote is
    skipped and the value ends at the first ``;`` or ``"``.  Surrounding
    whitespace is stripped.  Returns None when there is no such parameter.
    """
    start = s.lower().find(_MARKER)
    if start == -1:
        return None
    rest = s[start + len(_MARKER) :]
    if rest.startswith('"'):
        rest = rest[1:]
    end = len(rest)
    for index, ch in enumerate(rest):
        if ch in ';"':
            end = index
            break
    return rest[:end].strip(_C_WHITESPACE)