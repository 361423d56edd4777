"""
Excepciones del dominio RIF
"""

from rifven.config import RIF_FORMAT


class RifError(ValueError):
    """Excepción base para cualquier RIF inválido"""
    pass


class IdentifierTooLarge(RifError):
    """El identificador necesita más dígitos de los que admite el formato"""

    def __init__(self, identifier: int) -> None:
        self.identifier = identifier
        super().__init__(
            f"Invalid RIF identifier provided. {identifier} has more than "
            f"{RIF_FORMAT.identifier_width} digits"
        )


class ParseError(RifError):
    """Excepción base para errores al leer un RIF"""
    pass


class MalformedFormat(ParseError):
    """El texto no tiene la forma K-NNNNNNNN-C"""

    def __init__(self, raw: object) -> None:
        self.raw = raw
        super().__init__(
            "RIF must be splitted into 3 parts separated by dashes. "
            f"Eg. J-12345678-1. Provided {raw}"
        )


class InvalidKind(ParseError):
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f'Invalid RIF Kind provided, {value}. Expected one of "C, E, G, J, P, V"'
        )


class InvalidIdentifier(ParseError):
    def __init__(self, value: object, reason: str = "invalid digit found in string") -> None:
        self.value = value
        super().__init__(f"Invalid RIF identifier provided. {reason}: {value!r}")


class InvalidChecksumDigit(ParseError):
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"The provided check number is not a valid digit. Received: {value}"
        )


class ChecksumMismatch(ParseError):
    """El dígito verificador no coincide con el calculado"""

    def __init__(self, expected: int, received: int) -> None:
        self.expected = expected
        self.received = received
        super().__init__(
            f"Invalid check num provided, expected {expected} and received {received}"
        )
