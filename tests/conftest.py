import pytest

import gcode
from gcode import GeoPoint, StaticReferenceData

SEOUL = GeoPoint(37.5665, 126.9780)
BUSAN = GeoPoint(35.1796, 129.0756)
LONDON = GeoPoint(51.5072, -0.1276)

WORDS = ["alpha", "bravo", "charlie", "delta", "echo", "foxtrot", "golf"]
KOREAN_WORDS = ["가", "나", "다", "라", "마"]


@pytest.fixture
def regions():
    return {
        1: [
            {"name": "Seoul", "code": "SEL", "lat": SEOUL.lat, "long": SEOUL.lng},
            {"name": "Busan", "code": "PUS", "lat": BUSAN.lat, "long": BUSAN.lng},
            {"name": "London", "code": "LON", "lat": LONDON.lat, "long": LONDON.lng},
        ],
        2: [
            {"name": "Jongno", "code": "JN", "lat": 37.5730, "long": 126.9794},
            {"name": "Haeundae", "code": "HU", "lat": 35.1631, "long": 129.1636},
        ],
    }


@pytest.fixture
def provider(regions) -> StaticReferenceData:
    return StaticReferenceData(
        regions=regions,
        vocabularies={"English": WORDS, "Korean": KOREAN_WORDS},
    )


@pytest.fixture(autouse=True)
def reset_session():
    yield
    gcode.session.close()
