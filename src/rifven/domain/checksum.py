from __future__ import annotations

from rifven.config import RIF_FORMAT
from rifven.domain.exceptions import IdentifierTooLarge, InvalidIdentifier
from rifven.domain.value_objects.kind import Kind


def check_identifier(identifier: int) -> int:
    if isinstance(identifier, bool) or not isinstance(identifier, int):
        raise InvalidIdentifier(identifier, reason="identifier must be an integer")
    if identifier < 0:
        raise InvalidIdentifier(identifier, reason="identifier must not be negative")
    if identifier > RIF_FORMAT.max_identifier:
        raise IdentifierTooLarge(identifier)
    return identifier


def compute_checksum(kind: Kind, identifier: int) -> int:
    """Calcula el dígito verificador (módulo 11) para un tipo e identificador.

    El peso del tipo y los 8 dígitos del identificador (rellenados con ceros)
    se multiplican por ``RIF_FORMAT.multipliers`` y se suman; el dígito es
    ``11 - suma % 11``, y tanto 10 como 11 pasan a ser 0.
    """
    check_identifier(identifier)
    digits = [int(d) for d in str(identifier).zfill(RIF_FORMAT.identifier_width)]
    values = [kind.weight, *digits]

    total = sum(v * m for v, m in zip(values, RIF_FORMAT.multipliers))
    digit = 11 - total % 11
    if digit > 9:
        return 0
    return digit
