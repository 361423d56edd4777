"""Venezuelan RIF (Registro de Información Fiscal) validation.

>>> from rifven import Kind, Rif
>>> rif = Rif.new(Kind.LEGAL, 7013380, 5)
>>> str(rif)
'J-07013380-5'
>>> Rif.parse("J-07013380-5") == rif
True
"""
import logging

from rifven.application.dtos.rif_dto import RifDTO
from rifven.application.use_cases.validate_rif import RifValidationResult, ValidateRifUseCase
from rifven.config import RIF_FORMAT
from rifven.domain.checksum import compute_checksum
from rifven.domain.exceptions import (
    ChecksumMismatch,
    IdentifierTooLarge,
    InvalidChecksumDigit,
    InvalidIdentifier,
    InvalidKind,
    MalformedFormat,
    ParseError,
    RifError,
)
from rifven.domain.value_objects.kind import Kind
from rifven.domain.value_objects.rif import Rif

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ChecksumMismatch",
    "IdentifierTooLarge",
    "InvalidChecksumDigit",
    "InvalidIdentifier",
    "InvalidKind",
    "Kind",
    "MalformedFormat",
    "ParseError",
    "RIF_FORMAT",
    "Rif",
    "RifDTO",
    "RifError",
    "RifValidationResult",
    "ValidateRifUseCase",
    "compute_checksum",
]
