"""Blank-string checks shared by entities, DTOs and queries."""

# str.isspace() is true for these, but they count as text when deciding blankness
NON_BLANK_SPACES = frozenset("\u00a0\u2007\u202f\u0085")


def is_blank_char(char: str) -> bool:
    return char.isspace() and char not in NON_BLANK_SPACES


def has_text(value: str | None) -> bool:
    """True when the value contains at least one non-blank character."""
    return value is not None and any(not is_blank_char(c) for c in value)
