from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RifFormat:
    separator: str = "-"
    identifier_width: int = 8
    # Position 0 weighs the kind, positions 1-8 the identifier digits.
    multipliers: tuple[int, ...] = (4, 3, 2, 7, 6, 5, 4, 3, 2)
    kind_weights: tuple[tuple[str, int], ...] = (
        ("V", 1),
        ("E", 2),
        ("J", 3),
        ("P", 4),
        ("G", 5),
        ("C", 3),
    )

    @property
    def max_identifier(self) -> int:
        return 10**self.identifier_width - 1

    def weight_for(self, letter: str) -> int:
        for candidate, weight in self.kind_weights:
            if candidate == letter:
                return weight
        raise KeyError(letter)


RIF_FORMAT = RifFormat()
