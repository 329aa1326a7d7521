from __future__ import annotations

import logging
import os
from typing import Any, Optional

from .client import DataClient
from .codec import GCode
from .providers import (
    CachedReferenceData,
    FileReferenceData,
    HttpReferenceData,
    ReferenceData,
)
from .types import GeoPoint

logger = logging.getLogger(__name__)

_default_codec: Optional[GCode] = None
_owned_provider: Optional[CachedReferenceData] = None


def _provider_from_env(
    data_dir: Optional[str],
    base_url: Optional[str],
    timeout: float,
) -> Optional[CachedReferenceData]:
    data_dir = data_dir or os.getenv("GCODE_DATA_DIR")
    if data_dir:
        logger.debug("Using reference data from %s", data_dir)
        return FileReferenceData(data_dir)
    base_url = base_url or os.getenv("GCODE_DATA_URL")
    if base_url:
        logger.debug("Using reference data from %s", base_url)
        return HttpReferenceData(DataClient(base_url=base_url, timeout=timeout))
    return None


def setup(
    provider: Optional[ReferenceData] = None,
    data_dir: Optional[str] = None,
    base_url: Optional[str] = None,
    timeout: float = 10.0,
    codec: Optional[GCode] = None,
) -> GCode:
    global _default_codec, _owned_provider
    owned = None
    if codec is None:
        if provider is None:
            provider = owned = _provider_from_env(data_dir, base_url, timeout)
        codec = GCode(provider)
    close()
    _default_codec = codec
    _owned_provider = owned
    return _default_codec


def close() -> None:
    """Drop the default codec, closing any provider `setup` built for it."""
    global _default_codec, _owned_provider
    if _owned_provider is not None:
        logger.debug("Closing reference data provider %r", _owned_provider)
        _owned_provider.close()
    _default_codec = None
    _owned_provider = None


def get_codec() -> GCode:
    if _default_codec is None:
        raise RuntimeError("gcode.setup(...) must be called before encoding")
    return _default_codec


def encode(target: GeoPoint, **options: Any) -> str:
    return get_codec().encode(target, **options)


def decode(encoded: str, **options: Any) -> GeoPoint:
    return get_codec().decode(encoded, **options)
