"""
NIF (Número de Identificación Fiscal) validation for individuals.

The check letter is the remainder of the 8-digit number divided by 23,
used as an index into a fixed key string. NIFs starting with K, L or M
(minors, Spaniards abroad, foreigners without NIE) compute the letter as
if the leading character were a zero.
"""

from typing import Optional

from .digits import parse_digits
from .patterns import NIF_SHAPE, matches_shape, normalize

NIF_KEY = "TRWAGMYFPDXBNJZSQVHLCKE"
NIF_MODULUS = len(NIF_KEY)

_LEADING_LETTER_VALUES = {"K": "0", "L": "0", "M": "0"}


class NIFChecker:
    """Format and check-letter validation for NIF numbers."""

    def normalize(self, nif: str) -> Optional[str]:
        """Return the normalized NIF if it has NIF format, else None."""
        normalized = normalize(nif)
        if normalized is None or not matches_shape(normalized, NIF_SHAPE):
            return None
        return normalized

    def is_valid_format(self, nif: str) -> bool:
        return self.normalize(nif) is not None

    def check_letter(self, nif: str) -> str:
        """
        Compute the check letter for a NIF.

        The 9th character is ignored, so it can be replaced with a zero
        when only the letter is wanted.

        Args:
            nif: NIF string (will be normalized first)

        Returns:
            The check letter, or an empty string if the input does not
            have NIF format

        Examples:
            >>> NIFChecker().check_letter("335764280")
            'Q'
            >>> NIFChecker().check_letter("X6089822C")
            ''
        """
        normalized = self.normalize(nif)
        if normalized is None:
            return ""

        leading = _LEADING_LETTER_VALUES.get(normalized[0], normalized[0])
        number = parse_digits(leading + normalized[1:8])
        return NIF_KEY[number % NIF_MODULUS]

    def validate(self, nif: str) -> bool:
        """
        Validate a NIF against its check letter.

        Examples:
            >>> NIFChecker().validate("33576428Q")
            True
            >>> NIFChecker().validate("33576428A")
            False
        """
        normalized = self.normalize(nif)
        if normalized is None:
            return False

        return normalized[-1] == self.check_letter(normalized)


_checker = NIFChecker()


def is_valid_nif_format(nif: str) -> bool:
    """Check NIF format without looking at the check letter."""
    return _checker.is_valid_format(nif)


def nif_check_letter(nif: str) -> str:
    """Compute the NIF check letter ("" if the input is malformed)."""
    return _checker.check_letter(nif)


def is_valid_nif(nif: str) -> bool:
    """Validate a NIF: format and check letter."""
    return _checker.validate(nif)
