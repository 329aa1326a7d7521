from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from .exceptions import (
    ConnectionError,
    GCodeError,
    InvalidLanguage,
    NotFoundError,
    ServerError,
)
from .models import Region
from .region import check_region_level
from .wordset import Language

logger = logging.getLogger(__name__)


class DataClient:
    """Fetches region and word-set tables published as static JSON."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = client or httpx.Client(timeout=timeout)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "DataClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def get_regions(self, region_level: int = 1) -> List[Region]:
        check_region_level(region_level)
        response = self._request("GET", f"/region/region-{region_level}.json")
        data = response.json()
        return [Region.model_validate(item) for item in data]

    def get_words(self, language: Language) -> List[str]:
        language = Language.parse(language)
        try:
            response = self._request("GET", f"/wordset/{language.value.lower()}.json")
        except NotFoundError as exc:
            raise InvalidLanguage(f"Invalid language: {language.value}") from exc
        data: Any = response.json()
        if not isinstance(data, list):
            raise GCodeError(f"word set for {language.value} is not a JSON list")
        return [str(word) for word in data]

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            response = self._client.request(method, url, params=params)
        except httpx.RequestError as exc:
            raise ConnectionError(str(exc)) from exc

        if 200 <= response.status_code < 300:
            return response

        message = response.text or response.reason_phrase
        self._raise_for_status(response.status_code, message)
        return response

    @staticmethod
    def _raise_for_status(status_code: int, message: str) -> None:
        if status_code == 404:
            raise NotFoundError(message)
        if status_code >= 500:
            raise ServerError(message)
        raise GCodeError(message)
