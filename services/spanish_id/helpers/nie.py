"""
NIE (Número de Identidad de Extranjero) validation for foreign residents.

X, Y and Z prefixes stand for 0, 1 and 2; once replaced, the number is
checked exactly like a NIF. T-prefixed NIEs carry no arithmetic check
character and are accepted on format alone.
"""

from typing import Optional

from .nif import NIFChecker
from .patterns import NIE_SHAPE, matches_shape, normalize

NIE_PREFIX_DIGITS = {"X": "0", "Y": "1", "Z": "2"}

# T-series numbers have no defined check character
UNCHECKED_PREFIX = "T"


class NIEChecker:
    """Format and check-letter validation for NIE numbers."""

    def __init__(self, nif_checker: Optional[NIFChecker] = None):
        self._nif = nif_checker or NIFChecker()

    def normalize(self, nie: str) -> Optional[str]:
        """Return the normalized NIE if it has NIE format, else None."""
        normalized = normalize(nie)
        if normalized is None or not matches_shape(normalized, NIE_SHAPE):
            return None
        return normalized

    def is_valid_format(self, nie: str) -> bool:
        return self.normalize(nie) is not None

    def as_nif(self, nie: str) -> Optional[str]:
        """
        Map a NIE to its NIF-equivalent number.

        Examples:
            >>> NIEChecker().as_nif("X6089822C")
            '06089822C'
            >>> NIEChecker().as_nif("T1234567A")
            None
        """
        normalized = self.normalize(nie)
        if normalized is None or normalized[0] == UNCHECKED_PREFIX:
            return None
        return NIE_PREFIX_DIGITS[normalized[0]] + normalized[1:]

    def check_letter(self, nie: str) -> str:
        """Compute the NIE check letter ("" if malformed or T-prefixed)."""
        mapped = self.as_nif(nie)
        if mapped is None:
            return ""
        return self._nif.check_letter(mapped)

    def validate(self, nie: str) -> bool:
        """
        Validate a NIE.

        Examples:
            >>> NIEChecker().validate("X6089822C")
            True
            >>> NIEChecker().validate("T12345678")
            True
        """
        normalized = self.normalize(nie)
        if normalized is None:
            return False

        if normalized[0] == UNCHECKED_PREFIX:
            return True

        return self._nif.validate(self.as_nif(normalized))


_checker = NIEChecker()


def is_valid_nie_format(nie: str) -> bool:
    """Check NIE format without looking at the check letter."""
    return _checker.is_valid_format(nie)


def nie_check_letter(nie: str) -> str:
    """Compute the NIE check letter ("" if malformed or T-prefixed)."""
    return _checker.check_letter(nie)


def is_valid_nie(nie: str) -> bool:
    """Validate a NIE: format and, except for T-prefixed numbers, check letter."""
    return _checker.validate(nie)
