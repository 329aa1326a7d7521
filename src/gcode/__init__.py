"""Short, shareable location codes built on a spiral lattice enumeration."""

import logging

from .base_n import (
    decode_base32,
    encode_base32,
    from_base_digits,
    group_numeral,
    to_base_digits,
)
from .client import DataClient
from .codec import GCode
from .exceptions import (
    ConnectionError,
    GCodeError,
    InvalidEncoding,
    InvalidIndex,
    InvalidLanguage,
    InvalidRegionLevel,
    NotFoundError,
    RegionNotFound,
    ServerError,
)
from .models import EncodeOptions, Region
from .projection import from_offset, max_range_meters, to_offset
from .providers import (
    CachedReferenceData,
    FileReferenceData,
    HttpReferenceData,
    ReferenceData,
    StaticReferenceData,
)
from .region import RegionTable, haversine_km
from .session import decode, encode, get_codec, setup
from .spiral import index_to_point, point_to_index
from .types import GeoPoint, GridOffset, LatticePoint
from .wordset import Language, WordSet, decode_by_word_set, encode_by_word_set

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "CachedReferenceData",
    "ConnectionError",
    "DataClient",
    "EncodeOptions",
    "FileReferenceData",
    "GCode",
    "GCodeError",
    "GeoPoint",
    "GridOffset",
    "HttpReferenceData",
    "InvalidEncoding",
    "InvalidIndex",
    "InvalidLanguage",
    "InvalidRegionLevel",
    "Language",
    "LatticePoint",
    "NotFoundError",
    "ReferenceData",
    "Region",
    "RegionNotFound",
    "RegionTable",
    "ServerError",
    "StaticReferenceData",
    "WordSet",
    "decode",
    "decode_base32",
    "decode_by_word_set",
    "encode",
    "encode_base32",
    "encode_by_word_set",
    "from_base_digits",
    "from_offset",
    "get_codec",
    "group_numeral",
    "haversine_km",
    "index_to_point",
    "max_range_meters",
    "point_to_index",
    "setup",
    "to_base_digits",
    "to_offset",
]
