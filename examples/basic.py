from gcode import GCode, GeoPoint, StaticReferenceData


def main() -> None:
    provider = StaticReferenceData(
        regions={
            1: [{"name": "Seoul", "code": "SEL", "lat": 37.5665, "long": 126.978}],
            2: [{"name": "Jongno", "code": "JN", "lat": 37.573, "long": 126.9794}],
        },
        vocabularies={"English": ["apple", "river", "stone", "cloud", "amber", "maple"]},
    )
    codec = GCode(provider)

    target = GeoPoint(37.5666, 126.9781)
    code = codec.encode(target)
    print(code, codec.decode(code))

    words = codec.encode(target, region_level=2)
    print(words, codec.decode(words, region_level=2))

    center = GeoPoint(37.5665, 126.978)
    bare = codec.encode(target, center=center, precision_meters=1)
    print(bare, codec.decode(bare, center=center, precision_meters=1))


if __name__ == "__main__":
    main()
