"""
Category descriptions for Spanish identification numbers.

The leading character of a NIF, NIE or CIF tells what kind of holder it
belongs to. CIF entity letters follow BOE number 49, February 26th 2008
(article 3).
"""

from types import MappingProxyType
from typing import Mapping

from .cif import is_valid_cif, is_valid_cif_format
from .nie import is_valid_nie, is_valid_nie_format
from .nif import is_valid_nif, is_valid_nif_format
from .patterns import normalize

_DNI_HOLDER = "Español con documento nacional de identidad"
_NIE_HOLDER = "Extranjero residente en España e identificado por la Policía con un NIE"

IDENTIFICATION_TYPES: Mapping[str, str] = MappingProxyType({
    # Individuals (NIF)
    "K": "Español menor de catorce años o extranjero menor de dieciocho",
    "L": "Español mayor de catorce años residiendo en el extranjero",
    "M": "Extranjero mayor de dieciocho años sin NIE",
    **{digit: _DNI_HOLDER for digit in "0123456789"},

    # Foreign residents (NIE)
    "T": _NIE_HOLDER,
    "X": _NIE_HOLDER,
    "Y": _NIE_HOLDER,
    "Z": _NIE_HOLDER,

    # Legal entities (CIF)
    "A": "Sociedad Anónima",
    "B": "Sociedad de responsabilidad limitada",
    "C": "Sociedad colectiva",
    "D": "Sociedad comanditaria",
    "E": "Comunidad de bienes y herencias yacentes",
    "F": "Sociedad cooperativa",
    "G": "Asociación",
    "H": "Comunidad de propietarios en régimen de propiedad horizontal",
    "J": "Sociedad Civil, con o sin personalidad jurídica",
    "N": "Entidad extranjera",
    "P": "Corporación local",
    "Q": "Organismo público",
    "R": "Congregación o Institución Religiosa",
    "S": "Órgano de la Administración del Estado y Comunidades Autónomas",
    "U": "Unión Temporal de Empresas",
    "V": "Fondo de inversiones o de pensiones, agrupación de interés económico, etc",
    "W": "Establecimiento permanente de entidades no residentes en España",
})


def describe_identifier(doc_number: str, strict: bool = False) -> str:
    """
    Describe the holder category of an identification number.

    By default only the format is checked, so an identifier with a wrong
    check character still gets a description. With ``strict=True`` the
    check character must be correct as well.

    Args:
        doc_number: NIF, NIE or CIF string
        strict: Require a correct check character

    Returns:
        Category description, or an empty string if the identifier is not
        recognized

    Examples:
        >>> describe_identifier("A49640873")
        'Sociedad Anónima'
        >>> describe_identifier("A49640870")
        'Sociedad Anónima'
        >>> describe_identifier("A49640870", strict=True)
        ''
    """
    if strict:
        recognized = (
            is_valid_nif(doc_number)
            or is_valid_nie(doc_number)
            or is_valid_cif(doc_number)
        )
    else:
        recognized = (
            is_valid_nif_format(doc_number)
            or is_valid_nie_format(doc_number)
            or is_valid_cif_format(doc_number)
        )

    if not recognized:
        return ""

    return IDENTIFICATION_TYPES.get(normalize(doc_number)[0], "")
