"""
CIF (Código de Identificación Fiscal) validation for legal entities.

CIF structure is defined in BOE number 49, February 26th 2008 (article 2).
The check character is computed from the 7 central digits:

1. Sum the digits at even central positions (2nd, 4th, 6th)
2. Double each digit at odd central positions (1st, 3rd, 5th, 7th) and
   add the digits of each product
3. Take the last digit of the total; the check value is 10 minus it
   (0 when the last digit is 0)
4. Entities starting with P, Q, S, N, W or R use the letter at that
   index of "JABCDEFGHI"; every other entity uses the digit itself
"""

from typing import Optional

from .digits import parse_digits, sum_digits
from .patterns import (
    CIF_DIGIT_CHECK_SHAPE,
    CIF_LETTER_CHECK_LEADING,
    CIF_LETTER_CHECK_SHAPE,
    matches_shape,
    normalize,
)

CIF_CHECK_LETTERS = "JABCDEFGHI"


class CIFChecker:
    """Format and check-character validation for CIF numbers."""

    def normalize(self, cif: str) -> Optional[str]:
        """Return the normalized CIF if it has either CIF format, else None."""
        normalized = normalize(cif)
        if normalized is None:
            return None

        if matches_shape(normalized, CIF_LETTER_CHECK_SHAPE) or matches_shape(
            normalized, CIF_DIGIT_CHECK_SHAPE
        ):
            return normalized
        return None

    def is_valid_format(self, cif: str) -> bool:
        return self.normalize(cif) is not None

    def check_value(self, cif: str) -> Optional[int]:
        """Compute the numeric check value (0-9), or None if malformed."""
        normalized = self.normalize(cif)
        if normalized is None:
            return None

        central = [parse_digits(char) for char in normalized[1:8]]

        even_sum = sum(central[i] for i in (1, 3, 5))
        odd_sum = sum(sum_digits(central[i] * 2) for i in (0, 2, 4, 6))

        last_digit = (even_sum + odd_sum) % 10
        return 0 if last_digit == 0 else 10 - last_digit

    def check_digit(self, cif: str) -> str:
        """
        Compute the CIF check character.

        The 9th character is ignored, so it can be replaced with a zero
        when only the check character is wanted.

        Args:
            cif: CIF string (will be normalized first)

        Returns:
            A letter for P, Q, S, N, W and R entities, a digit otherwise,
            or an empty string if the input does not have CIF format

        Examples:
            >>> CIFChecker().check_digit("H24930830")
            '6'
            >>> CIFChecker().check_digit("Q2826000H")
            'H'
        """
        value = self.check_value(cif)
        if value is None:
            return ""

        if normalize(cif)[0] in CIF_LETTER_CHECK_LEADING:
            return CIF_CHECK_LETTERS[value]
        return str(value)

    def validate(self, cif: str) -> bool:
        """
        Validate a CIF against its check character.

        Examples:
            >>> CIFChecker().validate("F43298256")
            True
            >>> CIFChecker().validate("F43298257")
            False
        """
        normalized = self.normalize(cif)
        if normalized is None:
            return False

        return normalized[-1] == self.check_digit(normalized)


_checker = CIFChecker()


def is_valid_cif_format(cif: str) -> bool:
    """Check CIF format without looking at the check character."""
    return _checker.is_valid_format(cif)


def cif_check_digit(cif: str) -> str:
    """Compute the CIF check character ("" if the input is malformed)."""
    return _checker.check_digit(cif)


def is_valid_cif(cif: str) -> bool:
    """Validate a CIF: format and check character."""
    return _checker.validate(cif)
