"""ECMA 262 to ``regex`` dialect translation.

Schema patterns follow ECMA 262. Its character classes are ASCII-only with a
dedicated ``\\s`` set, and its ``$`` matches only at the very end of the input.
The shorthand classes are rewritten into explicit brackets and ``$`` into
``\\Z`` before compiling. Translated brackets may end up nested
inside user brackets (``[\\w\\-]`` becomes ``[[A-Za-z0-9_]\\-]``), so patterns
are compiled in ``regex.VERSION1`` mode, which supports nested sets.
"""
from __future__ import annotations

import regex

_CONTROL_GROUPS_RE = regex.compile(r"\\c[A-Za-z]")

_WHITESPACE = " \t\n\r\x0b\x0c\u2003\ufeff\u2029\xa0"

_CHARACTER_GROUPS: dict[str, str] = {
    "d": "[0-9]",
    "D": "[^0-9]",
    "w": "[A-Za-z0-9_]",
    "W": "[^A-Za-z0-9_]",
    "s": f"[{_WHITESPACE}]",
    "S": f"[^{_WHITESPACE}]",
}

PATTERN_FLAGS = regex.VERSION1


def _replace_control_group(match: regex.Match) -> str:
    # ``\cA`` is U+0001 ... ``\cZ`` is U+001A
    return chr(ord(match.group(0)[2].upper()) - 64)


def translate(pattern: str) -> str:
    """Rewrite control escapes, shorthand classes and the end anchor. Pure and deterministic."""
    source = _CONTROL_GROUPS_RE.sub(_replace_control_group, pattern)
    out: list[str] = []
    in_class = False
    chars = iter(source)
    for current in chars:
        if current != "\\":
            if current == "[":
                in_class = True
            elif current == "]":
                in_class = False
            elif current == "$" and not in_class:
                # ECMA ``$`` never matches before a trailing newline
                current = r"\Z"
            out.append(current)
            continue
        following = next(chars, None)
        if following is None:
            # Incomplete escape, left for the compiler to reject
            out.append(current)
        elif following in _CHARACTER_GROUPS:
            out.append(_CHARACTER_GROUPS[following])
        else:
            out.append(current + following)
    return "".join(out)


def convert_regex(pattern: str) -> regex.Pattern:
    """Translate and compile ``pattern``.

    Raises:
        regex.error: the translated pattern is not valid.
    """
    return regex.compile(translate(pattern), PATTERN_FLAGS)
