from __future__ import annotations

from dataclasses import dataclass

from rifven.config import RIF_FORMAT
from rifven.domain.checksum import check_identifier, compute_checksum
from rifven.domain.exceptions import (
    ChecksumMismatch,
    InvalidChecksumDigit,
    InvalidIdentifier,
    InvalidKind,
    MalformedFormat,
)
from rifven.domain.value_objects.kind import Kind


def _is_ascii_digits(value: str) -> bool:
    # str.isdigit() also accepts superscripts and other unicode digits
    return value.isascii() and value.isdigit()


@dataclass(frozen=True)
class Rif:
    """Value Object para un RIF venezolano.

    Anatomía::

        J - 07013380 - 5
        ^   ^^^^^^^^   ^
        |   |          dígito verificador
        |   identificador del contribuyente (hasta 8 dígitos)
        tipo

    Solo existen instancias válidas: el dígito verificador se compara con
    el tipo y el identificador al construir el objeto.
    """

    kind: Kind
    identifier: int
    checksum_digit: int

    def __post_init__(self) -> None:
        if not isinstance(self.kind, Kind):
            raise InvalidKind(self.kind)
        check_identifier(self.identifier)
        if (
            isinstance(self.checksum_digit, bool)
            or not isinstance(self.checksum_digit, int)
            or not 0 <= self.checksum_digit <= 9
        ):
            raise InvalidChecksumDigit(self.checksum_digit)

        expected = compute_checksum(self.kind, self.identifier)
        if expected != self.checksum_digit:
            raise ChecksumMismatch(expected, self.checksum_digit)

    @classmethod
    def new(cls, kind: Kind, identifier: int, checksum_digit: int) -> "Rif":
        return cls(kind, identifier, checksum_digit)

    @classmethod
    def from_parts(cls, kind: Kind, identifier: int) -> "Rif":
        """Construye un RIF calculando su dígito verificador."""
        return cls(kind, identifier, compute_checksum(kind, identifier))

    @classmethod
    def parse(cls, raw: str) -> "Rif":
        """Lee la forma canónica ``K-NNNNNNNN-C``, ej. ``J-07013380-5``.

        Lanza una subclase de ``ParseError`` que describe la primera parte inválida.
        """
        if not isinstance(raw, str):
            raise MalformedFormat(raw)

        parts = raw.split(RIF_FORMAT.separator)
        if len(parts) != 3:
            raise MalformedFormat(raw)
        kind_part, identifier_part, checksum_part = parts

        kind = Kind.from_char(kind_part)

        if not _is_ascii_digits(identifier_part):
            raise InvalidIdentifier(identifier_part)
        if len(identifier_part) > RIF_FORMAT.identifier_width:
            raise InvalidIdentifier(
                identifier_part,
                reason=f"expected at most {RIF_FORMAT.identifier_width} digits",
            )

        if len(checksum_part) != 1 or not _is_ascii_digits(checksum_part):
            raise InvalidChecksumDigit(checksum_part)

        return cls.new(kind, int(identifier_part), int(checksum_part))

    def to_string(self) -> str:
        identifier = str(self.identifier).zfill(RIF_FORMAT.identifier_width)
        return RIF_FORMAT.separator.join(
            (self.kind.to_char(), identifier, str(self.checksum_digit))
        )

    def __str__(self) -> str:
        return self.to_string()
