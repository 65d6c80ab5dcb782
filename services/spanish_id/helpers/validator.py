"""
Entry points that work with any kind of Spanish identification number.

``is_valid_identifier`` tries the NIF, NIE and CIF checks in that order.
``validate_identifier`` returns a richer result that tells a format
rejection apart from a check character mismatch.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .categories import describe_identifier
from .cif import CIFChecker
from .nie import NIEChecker
from .nif import NIFChecker
from .patterns import (
    CIF_DIGIT_CHECK_SHAPE,
    CIF_LETTER_CHECK_SHAPE,
    matches_shape,
    normalize,
)


class IdentifierKind(str, Enum):
    """Identifier family, derived from the leading character."""

    NIF = "nif"
    NIE = "nie"
    CIF_ORGANIZATION = "cif_organization"
    CIF_LEGAL_ENTITY = "cif_legal_entity"


class ValidationStatus(str, Enum):
    VALID = "valid"
    FORMAT_INVALID = "format_invalid"
    CHECKSUM_INVALID = "checksum_invalid"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one identifier."""
    value: str
    normalized: Optional[str]
    kind: Optional[IdentifierKind]
    status: ValidationStatus
    expected_check: str
    description: str

    @property
    def is_valid(self) -> bool:
        return self.status is ValidationStatus.VALID

    def to_dict(self) -> dict:
        return {
            "value": self.value,
            "normalized": self.normalized,
            "kind": self.kind.value if self.kind else None,
            "status": self.status.value,
            "valid": self.is_valid,
            "expected_check": self.expected_check,
            "description": self.description,
        }


_nif = NIFChecker()
_nie = NIEChecker(_nif)
_cif = CIFChecker()

# Dispatch order matters: the first checker that accepts wins
_CHECKERS = (_nif, _nie, _cif)


def identifier_kind(doc_number: str) -> Optional[IdentifierKind]:
    """
    Detect the family of an identifier from its format.

    Examples:
        >>> identifier_kind("33576428Q")
        <IdentifierKind.NIF: 'nif'>
        >>> identifier_kind("Q2826000H")
        <IdentifierKind.CIF_ORGANIZATION: 'cif_organization'>
        >>> identifier_kind("hello")
        None
    """
    if _nif.is_valid_format(doc_number):
        return IdentifierKind.NIF
    if _nie.is_valid_format(doc_number):
        return IdentifierKind.NIE

    normalized = normalize(doc_number)
    if normalized is None:
        return None
    if matches_shape(normalized, CIF_LETTER_CHECK_SHAPE):
        return IdentifierKind.CIF_ORGANIZATION
    if matches_shape(normalized, CIF_DIGIT_CHECK_SHAPE):
        return IdentifierKind.CIF_LEGAL_ENTITY
    return None


def is_valid_identifier(doc_number: str) -> bool:
    """
    Validate any Spanish identification number.

    NIFs and NIEs are personal numbers, CIFs belong to legal entities.

    Examples:
        >>> is_valid_identifier("G28667152")
        True
        >>> is_valid_identifier("33576428A")
        False
    """
    return any(checker.validate(doc_number) for checker in _CHECKERS)


def expected_check_character(doc_number: str) -> str:
    """Check character the identifier should carry ("" if there is none)."""
    kind = identifier_kind(doc_number)
    if kind is IdentifierKind.NIF:
        return _nif.check_letter(doc_number)
    if kind is IdentifierKind.NIE:
        return _nie.check_letter(doc_number)
    if kind in (IdentifierKind.CIF_ORGANIZATION, IdentifierKind.CIF_LEGAL_ENTITY):
        return _cif.check_digit(doc_number)
    return ""


def validate_identifier(doc_number: str, strict: bool = False) -> ValidationResult:
    """
    Validate an identifier and report why it failed, if it did.

    Args:
        doc_number: NIF, NIE or CIF string
        strict: Only describe identifiers with a correct check character

    Returns:
        ValidationResult with the detected kind, status, expected check
        character and category description
    """
    kind = identifier_kind(doc_number)

    if kind is None:
        status = ValidationStatus.FORMAT_INVALID
    elif is_valid_identifier(doc_number):
        status = ValidationStatus.VALID
    else:
        status = ValidationStatus.CHECKSUM_INVALID

    return ValidationResult(
        value=doc_number if isinstance(doc_number, str) else "",
        normalized=normalize(doc_number),
        kind=kind,
        status=status,
        expected_check=expected_check_character(doc_number),
        description=describe_identifier(doc_number, strict=strict),
    )
