import pydantic
import pytest

from gcode import (
    EncodeOptions,
    GCode,
    GeoPoint,
    InvalidEncoding,
    InvalidIndex,
    InvalidLanguage,
    InvalidRegionLevel,
    Language,
    RegionNotFound,
    StaticReferenceData,
)

CENTER = GeoPoint(37.5665, 126.978)
TARGET = GeoPoint(37.5666, 126.9781)
WORDS = ["alpha", "bravo", "charlie", "delta", "echo", "foxtrot", "golf"]


def _assert_close(decoded: GeoPoint, target: GeoPoint) -> None:
    assert decoded.lat == pytest.approx(target.lat, abs=5e-5)
    assert decoded.lng == pytest.approx(target.lng, abs=5e-5)


def test_encode_decode_with_center() -> None:
    codec = GCode()
    encoded = codec.encode(TARGET, center=CENTER)
    assert encoded == "2B"
    _assert_close(codec.decode(encoded, center=CENTER), TARGET)


def test_center_itself_encodes_to_one() -> None:
    assert GCode().encode(CENTER, center=CENTER) == "1"


def test_options_object_and_overrides() -> None:
    codec = GCode()
    options = EncodeOptions(center=CENTER, precision_meters=10)
    coarse = codec.encode(TARGET, options)
    assert coarse == codec.encode(TARGET, center=CENTER, precision_meters=10)
    assert codec.encode(TARGET, options, precision_meters=3) == "2B"
    _assert_close(codec.decode(coarse, options), TARGET)


def test_region_anchored_code(provider) -> None:
    codec = GCode(provider)
    encoded = codec.encode(TARGET)
    assert encoded == "SEL-2B"
    _assert_close(codec.decode(encoded), TARGET)
    _assert_close(codec.decode("sel-2b"), TARGET)


def test_word_set_code_round_trip(provider) -> None:
    codec = GCode(provider)
    target = GeoPoint(37.5741, 126.9810)
    encoded = codec.encode(target, region_level=2)
    prefix, _, body = encoded.partition("-")
    assert prefix == "Jongno"
    assert set(body.split("-")) <= set(WORDS)
    _assert_close(codec.decode(encoded, region_level=2), target)


def test_word_set_code_with_center(provider) -> None:
    codec = GCode(provider)
    assert codec.encode(TARGET, center=CENTER, region_level=2) == "bravo-delta-foxtrot"
    korean = codec.encode(TARGET, center=CENTER, region_level=2, language=Language.KOREAN)
    assert korean == "라-가-가"
    decoded = codec.decode(korean, center=CENTER, region_level=2, language="Korean")
    _assert_close(decoded, TARGET)


def test_missing_region() -> None:
    with pytest.raises(RegionNotFound):
        GCode().encode(TARGET)
    with pytest.raises(RegionNotFound):
        GCode().decode("SEL-2B")


def test_unknown_prefix(provider) -> None:
    with pytest.raises(RegionNotFound):
        GCode(provider).decode("XYZ-2B")


def test_missing_vocabulary(regions) -> None:
    codec = GCode(StaticReferenceData(regions=regions))
    with pytest.raises(InvalidLanguage):
        codec.encode(TARGET, center=CENTER, region_level=2)
    with pytest.raises(InvalidLanguage):
        GCode().encode(TARGET, center=CENTER, region_level=2)


def test_invalid_region_level(provider) -> None:
    with pytest.raises(InvalidRegionLevel):
        GCode(provider).encode(TARGET, region_level=3)
    with pytest.raises(InvalidRegionLevel):
        GCode().decode("2B", center=CENTER, region_level=0)


@pytest.mark.parametrize("encoded", ["SEL", "-2B", "SEL-", ""])
def test_malformed_anchored_code(provider, encoded: str) -> None:
    with pytest.raises(InvalidEncoding):
        GCode(provider).decode(encoded)


def test_malformed_body() -> None:
    with pytest.raises(InvalidEncoding):
        GCode().decode("2B!", center=CENTER)
    with pytest.raises(InvalidEncoding):
        GCode().decode("", center=CENTER)


def test_zero_body_is_not_an_index() -> None:
    with pytest.raises(InvalidIndex):
        GCode().decode("0", center=CENTER)


def test_options_are_validated() -> None:
    with pytest.raises(pydantic.ValidationError):
        GCode().encode(TARGET, center=CENTER, precision_meters=0)
    with pytest.raises(pydantic.ValidationError):
        GCode().encode(TARGET, center=CENTER, precision=3)


def test_unknown_language_is_rejected(provider) -> None:
    codec = GCode(provider)
    with pytest.raises(InvalidLanguage):
        codec.encode(TARGET, center=CENTER, region_level=2, language="Klingon")
    with pytest.raises(InvalidLanguage):
        codec.decode("bravo", center=CENTER, region_level=2, language="Klingon")
    with pytest.raises(InvalidLanguage):
        EncodeOptions(language=7)


def test_language_names_are_case_insensitive(provider) -> None:
    codec = GCode(provider)
    lower = codec.encode(TARGET, center=CENTER, region_level=2, language="korean")
    assert lower == "라-가-가"
    assert EncodeOptions(language="ENGLISH").language is Language.ENGLISH


def test_hyphenated_region_cannot_be_loaded() -> None:
    jung_gu = {"name": "Jung-gu", "code": "JG", "lat": 37.5641, "long": 126.9979}
    with pytest.raises(pydantic.ValidationError):
        StaticReferenceData(regions={2: [jung_gu]}, vocabularies={"English": WORDS})
