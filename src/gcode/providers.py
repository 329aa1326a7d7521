"""Reference data (regions and word sets) handed to the codec.

Tables are loaded on first use and kept for the life of the provider. The
file and HTTP layouts are the same::

    region/region-1.json      [{"name", "code", "lat", "long"}, ...]
    region/region-2.json
    wordset/english.json      ["word", ...]
    wordset/korean.json
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Protocol, Sequence, Union

from .client import DataClient
from .exceptions import InvalidLanguage
from .models import Region
from .region import RegionTable, check_region_level
from .types import GeoPoint
from .wordset import Language, WordSet

logger = logging.getLogger(__name__)

RegionLike = Union[Region, Mapping[str, Any]]


class ReferenceData(Protocol):
    def find_closest_region(self, point: GeoPoint, region_level: int = 1) -> Optional[Region]:
        ...

    def find_region(self, key: str, region_level: int = 1) -> Optional[Region]:
        ...

    def load_vocabulary(self, language: Union[Language, str]) -> WordSet:
        ...


class CachedReferenceData(ABC):
    def __init__(self) -> None:
        self._tables: Dict[int, RegionTable] = {}
        self._word_sets: Dict[Language, WordSet] = {}

    @abstractmethod
    def _load_regions(self, region_level: int) -> List[Region]:
        ...

    @abstractmethod
    def _load_words(self, language: Language) -> Sequence[str]:
        ...

    def _table(self, region_level: int) -> RegionTable:
        check_region_level(region_level)
        table = self._tables.get(region_level)
        if table is None:
            regions = self._load_regions(region_level)
            table = RegionTable({region_level: regions})
            self._tables[region_level] = table
            logger.debug("Loaded %d level-%d regions", len(regions), region_level)
        return table

    def close(self) -> None:
        """Release resources held by the provider."""

    def find_closest_region(self, point: GeoPoint, region_level: int = 1) -> Optional[Region]:
        return self._table(region_level).find_closest(point, region_level)

    def find_region(self, key: str, region_level: int = 1) -> Optional[Region]:
        return self._table(region_level).find(key, region_level)

    def load_vocabulary(self, language: Union[Language, str]) -> WordSet:
        language = Language.parse(language)
        word_set = self._word_sets.get(language)
        if word_set is None:
            word_set = WordSet(self._load_words(language))
            self._word_sets[language] = word_set
            logger.debug("Loaded %d %s words", len(word_set), language.value)
        return word_set


def _to_region(item: RegionLike) -> Region:
    if isinstance(item, Region):
        return item
    return Region.model_validate(item)


class StaticReferenceData(CachedReferenceData):
    """Provider over tables already held in memory."""

    def __init__(
        self,
        regions: Optional[Mapping[int, Iterable[RegionLike]]] = None,
        vocabularies: Optional[Mapping[Union[Language, str], Sequence[str]]] = None,
    ) -> None:
        super().__init__()
        self._region_source = {
            check_region_level(level): [_to_region(item) for item in items]
            for level, items in (regions or {}).items()
        }
        self._word_source = {
            Language.parse(language): list(words)
            for language, words in (vocabularies or {}).items()
        }

    def _load_regions(self, region_level: int) -> List[Region]:
        return self._region_source.get(region_level, [])

    def _load_words(self, language: Language) -> Sequence[str]:
        if language not in self._word_source:
            raise InvalidLanguage(f"Invalid language: {language.value}")
        return self._word_source[language]


class FileReferenceData(CachedReferenceData):
    """Provider reading the JSON tables from a data directory."""

    def __init__(self, data_dir: Union[str, Path]) -> None:
        super().__init__()
        self.data_dir = Path(data_dir)

    def _read_json(self, path: Path) -> Any:
        logger.debug("Reading %s", path)
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _load_regions(self, region_level: int) -> List[Region]:
        path = self.data_dir / "region" / f"region-{region_level}.json"
        if not path.exists():
            logger.debug("No region table at %s", path)
            return []
        return [_to_region(item) for item in self._read_json(path)]

    def _load_words(self, language: Language) -> Sequence[str]:
        path = self.data_dir / "wordset" / f"{language.value.lower()}.json"
        if not path.exists():
            raise InvalidLanguage(f"Invalid language: {language.value}")
        return [str(word) for word in self._read_json(path)]


class HttpReferenceData(CachedReferenceData):
    """Provider fetching the JSON tables through a :class:`DataClient`."""

    def __init__(self, client: DataClient) -> None:
        super().__init__()
        self.client = client

    def _load_regions(self, region_level: int) -> List[Region]:
        return self.client.get_regions(region_level)

    def _load_words(self, language: Language) -> Sequence[str]:
        return self.client.get_words(language)

    def close(self) -> None:
        self.client.close()
