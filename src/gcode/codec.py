"""Encode locations as short codes and decode them back.

A code is ``<PREFIX>-<BODY>`` when anchored to a region, or ``<BODY>`` when
the caller supplies the center. The prefix is a single token (region code at
level 1, region name at level 2). The body is an upper-case base-32 numeral
at level 1 and a ``-``-joined run of words otherwise.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Tuple

from .base_n import decode_base32, encode_base32
from .exceptions import InvalidEncoding, InvalidLanguage, RegionNotFound
from .models import EncodeOptions, Region
from .projection import from_offset, to_offset
from .providers import ReferenceData
from .region import check_region_level, prefix_of
from .spiral import index_to_point, point_to_index
from .types import GeoPoint, GridOffset
from .wordset import SEPARATOR, decode_by_word_set, encode_by_word_set

logger = logging.getLogger(__name__)


class GCode:
    def __init__(self, provider: Optional[ReferenceData] = None) -> None:
        self.provider = provider

    @staticmethod
    def _options(options: Optional[EncodeOptions], overrides: Any) -> EncodeOptions:
        overrides = {key: value for key, value in overrides.items() if value is not None}
        if options is None:
            options = EncodeOptions(**overrides)
        elif overrides:
            options = EncodeOptions(**{**options.model_dump(), **overrides})
        check_region_level(options.region_level)
        return options

    def _closest_region(self, target: GeoPoint, region_level: int) -> Region:
        if self.provider is None:
            raise RegionNotFound("no center given and no region provider configured")
        region = self.provider.find_closest_region(target, region_level)
        if region is None:
            raise RegionNotFound(f"no level-{region_level} region near {target}")
        return region

    def _named_region(self, key: str, region_level: int) -> Region:
        if self.provider is None:
            raise RegionNotFound("no center given and no region provider configured")
        region = self.provider.find_region(key, region_level)
        if region is None:
            raise RegionNotFound(f"unknown level-{region_level} region {key!r}")
        return region

    def _render(self, n: int, options: EncodeOptions) -> str:
        if options.region_level == 1:
            return encode_base32(n)
        if self.provider is None:
            raise InvalidLanguage(f"no word set registered for {options.language.value}")
        return encode_by_word_set(n, self.provider.load_vocabulary(options.language))

    def _parse(self, body: str, options: EncodeOptions) -> int:
        if options.region_level == 1:
            return decode_base32(body)
        if self.provider is None:
            raise InvalidLanguage(f"no word set registered for {options.language.value}")
        return decode_by_word_set(body, self.provider.load_vocabulary(options.language))

    def encode(
        self,
        target: GeoPoint,
        options: Optional[EncodeOptions] = None,
        **overrides: Any,
    ) -> str:
        """Encode ``target``.

        Options can be passed as an :class:`EncodeOptions` or as keyword
        arguments (``center``, ``region_level``, ``precision_meters``,
        ``language``); keywords win over the options object.
        """
        options = self._options(options, overrides)
        prefix: Optional[str] = None
        center = options.center
        if center is None:
            region = self._closest_region(target, options.region_level)
            prefix = prefix_of(region, options.region_level)
            center = region.center
            logger.debug("Anchored %s to region %s", target, region.name)

        offset = to_offset(center, target, options.precision_meters)
        n = point_to_index(offset.lat, offset.lng)
        body = self._render(n, options)
        return f"{prefix}{SEPARATOR}{body}" if prefix else body

    def _split(self, encoded: str, options: EncodeOptions) -> Tuple[Optional[str], str]:
        """Separate the region prefix from the body.

        With a center the whole string is the body; otherwise the first
        token is the prefix.
        """
        text = encoded.strip()
        if options.center is not None:
            return None, text
        prefix, sep, body = text.partition(SEPARATOR)
        if not sep or not prefix or not body:
            raise InvalidEncoding(f"expected '<region>{SEPARATOR}<code>', got {encoded!r}")
        return prefix, body

    def decode(
        self,
        encoded: str,
        options: Optional[EncodeOptions] = None,
        **overrides: Any,
    ) -> GeoPoint:
        options = self._options(options, overrides)
        prefix, body = self._split(encoded, options)
        center = options.center
        if prefix is not None:
            center = self._named_region(prefix, options.region_level).center

        n = self._parse(body, options)
        x, y = index_to_point(n)
        return from_offset(center, GridOffset(lat=x, lng=y), options.precision_meters)
