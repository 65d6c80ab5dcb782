"""
Helper utilities for Spanish identification numbers.

This module provides format and check character validation for NIF, NIE
and CIF numbers, plus category descriptions for their leading characters.
"""

from .categories import IDENTIFICATION_TYPES, describe_identifier
from .cif import cif_check_digit, is_valid_cif, is_valid_cif_format
from .nie import is_valid_nie, is_valid_nie_format, nie_check_letter
from .nif import is_valid_nif, is_valid_nif_format, nif_check_letter
from .validator import (
    IdentifierKind,
    ValidationResult,
    ValidationStatus,
    identifier_kind,
    is_valid_identifier,
    validate_identifier,
)

__all__ = [
    "IDENTIFICATION_TYPES",
    "describe_identifier",
    "cif_check_digit",
    "is_valid_cif",
    "is_valid_cif_format",
    "is_valid_nie",
    "is_valid_nie_format",
    "nie_check_letter",
    "is_valid_nif",
    "is_valid_nif_format",
    "nif_check_letter",
    "IdentifierKind",
    "ValidationResult",
    "ValidationStatus",
    "identifier_kind",
    "is_valid_identifier",
    "validate_identifier",
]
