from __future__ import annotations

import logging
from dataclasses import dataclass

from rifven.domain.exceptions import RifError
from rifven.domain.value_objects.rif import Rif

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RifValidationResult:
    status: str  # "VALID" | "INVALID"
    rif: Rif | None
    canonical: str | None
    message: str

    @property
    def is_valid(self) -> bool:
        return self.status == "VALID"


class ValidateRifUseCase:
    """Valida un RIF en texto y reporta los errores en el resultado en vez de lanzarlos."""

    def execute(self, raw: str) -> RifValidationResult:
        try:
            rif = Rif.parse(raw)
        except RifError as e:
            logger.debug("Rejected RIF %r: %s", raw, e)
            return RifValidationResult("INVALID", None, None, str(e))
        return RifValidationResult("VALID", rif, rif.to_string(), "Valid RIF")
