from __future__ import annotations

from enum import Enum

from rifven.config import RIF_FORMAT
from rifven.domain.exceptions import InvalidKind


class Kind(str, Enum):
    """Value Object para el tipo de contribuyente (letra inicial del RIF).

    - C: Comuna o Consejo Comunal
    - E: Persona natural extranjera
    - G: Ente gubernamental
    - J: Persona jurídica
    - P: Titular de pasaporte
    - V: Persona natural venezolana
    """

    TOWNSHIP = "C"
    FOREIGNER = "E"
    GOVERNMENT = "G"
    LEGAL = "J"
    PASSPORT = "P"
    VENEZUELAN = "V"

    @classmethod
    def from_char(cls, c: str) -> "Kind":
        # Only the canonical uppercase letters are accepted.
        if not isinstance(c, str) or len(c) != 1:
            raise InvalidKind(c)
        try:
            return cls(c)
        except ValueError:
            raise InvalidKind(c) from None

    def to_char(self) -> str:
        return self.value

    @property
    def weight(self) -> int:
        """Peso del tipo, primer término de la suma del dígito verificador."""
        return RIF_FORMAT.weight_for(self.value)

    def __str__(self) -> str:
        return self.value
