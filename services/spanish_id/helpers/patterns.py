"""
Positional format rules for Spanish identification numbers.

Every identifier (NIF, NIE or CIF) is 9 characters long once normalized.
A family's shape is described as one set of allowed characters per
position, so each rule can be read and tested on its own instead of
living inside a regular expression.

Numeric-leading inputs may omit their leading zeros: ``"1234567L"`` is
checked as ``"01234567L"``.
"""

from typing import FrozenSet, Optional, Tuple

ID_LENGTH = 9

DIGITS: FrozenSet[str] = frozenset("0123456789")
ASCII_LETTERS: FrozenSet[str] = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")

# Leading characters per family
NIF_LEADING: FrozenSet[str] = frozenset("KLM") | DIGITS
NIE_LEADING: FrozenSet[str] = frozenset("XYZT")
CIF_LETTER_CHECK_LEADING: FrozenSet[str] = frozenset("PQSNWR")
CIF_DIGIT_CHECK_LEADING: FrozenSet[str] = frozenset("ABCDEFGHJUV")

Shape = Tuple[FrozenSet[str], ...]

# Positions 1-8 are always constrained. A shape with a 9th entry also
# constrains the check position.
NIF_SHAPE: Shape = (NIF_LEADING,) + (DIGITS,) * 7
NIE_SHAPE: Shape = (NIE_LEADING,) + (DIGITS,) * 7
CIF_LETTER_CHECK_SHAPE: Shape = (CIF_LETTER_CHECK_LEADING,) + (DIGITS,) * 7
CIF_DIGIT_CHECK_SHAPE: Shape = (CIF_DIGIT_CHECK_LEADING,) + (DIGITS,) * 8

_LOWER_TO_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)


def normalize(candidate: str) -> Optional[str]:
    """
    Normalize a candidate identifier.

    Steps:
    1. Strip surrounding whitespace
    2. Upper-case ASCII letters (other characters are left untouched)
    3. If the first character is not an ASCII letter, left-pad with zeros
       and keep the rightmost 9 characters

    Args:
        candidate: Raw identifier text

    Returns:
        Normalized identifier, or None for empty or non-string input

    Examples:
        >>> normalize("33576428q")
        '33576428Q'
        >>> normalize("1234567L")
        '01234567L'
        >>> normalize("x6089822c")
        'X6089822C'
        >>> normalize("")
        None
    """
    if not candidate or not isinstance(candidate, str):
        return None

    fixed = candidate.strip().translate(_LOWER_TO_UPPER)
    if not fixed:
        return None

    if fixed[0] not in ASCII_LETTERS:
        fixed = ("0" * ID_LENGTH + fixed)[-ID_LENGTH:]

    return fixed


def matches_shape(normalized: str, shape: Shape) -> bool:
    """Check an already normalized identifier against a positional shape."""
    if len(normalized) != ID_LENGTH:
        return False

    return all(char in allowed for char, allowed in zip(normalized, shape))


def matches(candidate: str, shape: Shape) -> bool:
    """
    Check whether a candidate respects a positional shape.

    The candidate is normalized first, so lowercase letters and missing
    leading zeros are accepted.

    Args:
        candidate: Raw identifier text
        shape: One allowed-character set per constrained position

    Returns:
        True if the normalized candidate is 9 characters long and every
        constrained position holds an allowed character
    """
    normalized = normalize(candidate)
    if normalized is None:
        return False

    return matches_shape(normalized, shape)
