"""
Tests for family-agnostic validation and rich validation results.
"""

import pytest

from services.spanish_id.helpers import (
    IdentifierKind,
    ValidationStatus,
    identifier_kind,
    is_valid_cif,
    is_valid_identifier,
    is_valid_nie,
    is_valid_nif,
    validate_identifier,
)

SAMPLES = [
    "33576428Q",
    "33576428A",
    "1234567L",
    "K1234567L",
    "X6089822C",
    "X6089822D",
    "T1234567A",
    "F43298256",
    "F43298257",
    "G28667152",
    "Q2826000H",
    "Q2826000A",
    "I28667152",
    "hello",
    "",
    None,
]


class TestIsValidIdentifier:
    """Tests for the NIF, NIE, CIF dispatcher."""

    @pytest.mark.parametrize(
        "doc_number,expected",
        [
            ("G28667152", True),
            ("33576428Q", True),
            ("X6089822C", True),
            ("F43298256", True),
            ("q2826000h", True),
            ("33576428A", False),
            ("F43298257", False),
            ("hello", False),
            ("", False),
            (None, False),
        ],
        ids=[
            "valid_cif_digit",
            "valid_nif",
            "valid_nie",
            "valid_cif",
            "valid_lowercase_cif_letter",
            "invalid_nif_checksum",
            "invalid_cif_checksum",
            "invalid_text",
            "invalid_empty",
            "invalid_none",
        ],
    )
    def test_is_valid_identifier(self, doc_number, expected):
        assert is_valid_identifier(doc_number) is expected

    @pytest.mark.parametrize("doc_number", SAMPLES)
    def test_equals_any_family(self, doc_number):
        """The dispatcher accepts exactly what one of the families accepts."""
        expected = (
            is_valid_nif(doc_number) or is_valid_nie(doc_number) or is_valid_cif(doc_number)
        )
        assert is_valid_identifier(doc_number) is expected


class TestIdentifierKind:
    """Tests for family detection."""

    @pytest.mark.parametrize(
        "doc_number,expected",
        [
            ("33576428Q", IdentifierKind.NIF),
            ("33576428A", IdentifierKind.NIF),
            ("L1234567L", IdentifierKind.NIF),
            ("X6089822C", IdentifierKind.NIE),
            ("T1234567A", IdentifierKind.NIE),
            ("Q2826000H", IdentifierKind.CIF_ORGANIZATION),
            ("W0000000J", IdentifierKind.CIF_ORGANIZATION),
            ("F43298256", IdentifierKind.CIF_LEGAL_ENTITY),
            ("B1234567A", None),
            ("hello", None),
            (None, None),
        ],
    )
    def test_identifier_kind(self, doc_number, expected):
        assert identifier_kind(doc_number) is expected


class TestValidateIdentifier:
    """Tests for the rich validation result."""

    def test_valid_nif(self):
        result = validate_identifier("33576428q")
        assert result.status is ValidationStatus.VALID
        assert result.is_valid is True
        assert result.kind is IdentifierKind.NIF
        assert result.normalized == "33576428Q"
        assert result.expected_check == "Q"
        assert result.description == "Español con documento nacional de identidad"

    def test_checksum_invalid(self):
        result = validate_identifier("33576428A")
        assert result.status is ValidationStatus.CHECKSUM_INVALID
        assert result.is_valid is False
        assert result.expected_check == "Q"

    def test_format_invalid(self):
        result = validate_identifier("hello")
        assert result.status is ValidationStatus.FORMAT_INVALID
        assert result.kind is None
        assert result.expected_check == ""
        assert result.description == ""

    def test_t_prefixed_nie_has_no_expected_check(self):
        result = validate_identifier("T1234567A")
        assert result.status is ValidationStatus.VALID
        assert result.expected_check == ""

    def test_cif_letter_check(self):
        result = validate_identifier("Q2826000A")
        assert result.status is ValidationStatus.CHECKSUM_INVALID
        assert result.kind is IdentifierKind.CIF_ORGANIZATION
        assert result.expected_check == "H"
        assert result.description == "Organismo público"

    def test_strict_description(self):
        assert validate_identifier("A49640870").description == "Sociedad Anónima"
        assert validate_identifier("A49640870", strict=True).description == ""

    def test_none_input(self):
        result = validate_identifier(None)
        assert result.status is ValidationStatus.FORMAT_INVALID
        assert result.value == ""
        assert result.normalized is None

    @pytest.mark.parametrize("doc_number", SAMPLES)
    def test_agrees_with_boolean_api(self, doc_number):
        assert validate_identifier(doc_number).is_valid is is_valid_identifier(doc_number)

    def test_to_dict(self):
        data = validate_identifier("F43298256").to_dict()
        assert data == {
            "value": "F43298256",
            "normalized": "F43298256",
            "kind": "cif_legal_entity",
            "status": "valid",
            "valid": True,
            "expected_check": "6",
            "description": "Sociedad cooperativa",
        }
