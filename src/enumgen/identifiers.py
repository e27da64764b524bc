"""
Identifier sanitization for generated enum source.

Two related but deliberately different rules:

    Type names:
        Runs of characters outside [A-Za-z0-9_] collapse to a single "_",
        then every leading digit or "_" is stripped.
        "2Colors!" -> "Colors_"

    Member names:
        Runs of characters outside [A-Za-z0-9] collapse to a single "_"
        (underscores included), then a single "_" is prepended when the
        result starts with a digit.
        "Green!" -> "Green_", "1st" -> "_1st"

Member names keep literal "_<digits>" suffixes, which is what the
suffix-increment conflict rule relies on.
"""

import re


_TYPE_INVALID_RE = re.compile(r"[^A-Za-z0-9_]+")
_MEMBER_INVALID_RE = re.compile(r"[^A-Za-z0-9]+")
_TYPE_LEADING = "0123456789_"

_SUFFIX_RE = re.compile(r"_([0-9]+)$")
_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def sanitize_type_name(text: str) -> str:
    """
    Sanitize text for use as an enum type name.

    The result may be empty if the input held nothing but invalid or
    leading characters (e.g. "123" or "___"). Callers decide what an
    empty name means.
    """
    corrected = _TYPE_INVALID_RE.sub("_", text)
    return corrected.lstrip(_TYPE_LEADING)


def sanitize_member_name(text: str) -> str:
    """Sanitize text for use as an enum member name."""
    corrected = _MEMBER_INVALID_RE.sub("_", text)
    if corrected and corrected[0].isdigit():
        return "_" + corrected
    return corrected


def next_suffix_name(name: str) -> str:
    """
    Apply the suffix-increment rule.

    Examples:
        "Red"     -> "Red_1"
        "Red_1"   -> "Red_2"
        "Foo_9"   -> "Foo_10"
        "Foo_007" -> "Foo_8"
    """
    match = _SUFFIX_RE.search(name)
    if match is None:
        return f"{name}_1"
    number = int(match.group(1)) + 1
    return f"{name[:match.start(1)]}{number}"


def is_valid_identifier(text: str) -> bool:
    """True if text is usable verbatim as a C-family identifier."""
    return bool(_IDENTIFIER_RE.match(text))


__all__ = [
    "sanitize_type_name",
    "sanitize_member_name",
    "next_suffix_name",
    "is_valid_identifier",
]
