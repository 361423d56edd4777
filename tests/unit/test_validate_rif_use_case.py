import logging

from rifven.application.dtos.rif_dto import RifDTO
from rifven.application.use_cases.validate_rif import ValidateRifUseCase
from rifven.domain.value_objects.kind import Kind
from rifven.domain.value_objects.rif import Rif


def test_validate_accepts_valid_rif():
    res = ValidateRifUseCase().execute("J-7013380-5")
    assert res.status == "VALID"
    assert res.is_valid
    assert res.rif == Rif.new(Kind.LEGAL, 7013380, 5)
    assert res.canonical == "J-07013380-5"


def test_validate_reports_error_without_raising():
    res = ValidateRifUseCase().execute("J-07013380-9")
    assert res.status == "INVALID"
    assert not res.is_valid
    assert res.rif is None
    assert res.canonical is None
    assert res.message == "Invalid check num provided, expected 5 and received 9"


def test_validate_logs_rejections_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="rifven"):
        ValidateRifUseCase().execute("X-07013380-5")
    assert "Rejected RIF 'X-07013380-5'" in caplog.text


def test_rif_dto_from_domain():
    dto = RifDTO.from_domain(Rif.parse("G-20000044-9"))
    assert dto == RifDTO(kind="G", identifier=20000044, checksum_digit=9, rif="G-20000044-9")


def test_public_api_exports():
    import rifven

    assert rifven.Rif.parse("J-07013380-5") == rifven.Rif.new(rifven.Kind.LEGAL, 7013380, 5)
    assert rifven.compute_checksum(rifven.Kind.LEGAL, 7013380) == 5
    assert issubclass(rifven.MalformedFormat, rifven.ParseError)
    assert issubclass(rifven.IdentifierTooLarge, rifven.RifError)
    assert "RifFormat" not in rifven.__all__
