import pytest

from rifven.domain.exceptions import InvalidKind, ParseError
from rifven.domain.value_objects.kind import Kind

LETTERS = {
    "C": Kind.TOWNSHIP,
    "E": Kind.FOREIGNER,
    "G": Kind.GOVERNMENT,
    "J": Kind.LEGAL,
    "P": Kind.PASSPORT,
    "V": Kind.VENEZUELAN,
}


def test_from_char_maps_every_letter():
    for letter, kind in LETTERS.items():
        assert Kind.from_char(letter) is kind


def test_to_char_is_inverse_of_from_char():
    for kind in Kind:
        assert Kind.from_char(kind.to_char()) is kind
        assert str(kind) == kind.to_char()


@pytest.mark.parametrize("value", ["j", "v", "X", "M", "", "JJ", " J", None, 3])
def test_from_char_rejects_unknown_input(value):
    with pytest.raises(InvalidKind):
        Kind.from_char(value)


def test_invalid_kind_is_a_parse_error():
    with pytest.raises(ParseError, match="Invalid RIF Kind provided, M"):
        Kind.from_char("M")


def test_weights():
    weights = {kind.to_char(): kind.weight for kind in Kind}
    assert weights == {"V": 1, "E": 2, "J": 3, "P": 4, "G": 5, "C": 3}
