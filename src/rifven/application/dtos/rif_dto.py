from dataclasses import dataclass

from rifven.domain.value_objects.rif import Rif


@dataclass(frozen=True)
class RifDTO:
    kind: str
    identifier: int
    checksum_digit: int
    rif: str

    @classmethod
    def from_domain(cls, rif: Rif) -> "RifDTO":
        return cls(
            kind=rif.kind.to_char(),
            identifier=rif.identifier,
            checksum_digit=rif.checksum_digit,
            rif=rif.to_string(),
        )
