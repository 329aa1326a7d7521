from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .projection import DEFAULT_PRECISION_METERS
from .types import GeoPoint
from .wordset import SEPARATOR, Language


class Region(BaseModel):
    name: str
    code: str
    lat: float
    lng: float = Field(alias="long")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("name", "code")
    @classmethod
    def _single_token(cls, value: str) -> str:
        # Codes carry the region as a single "-"-separated token.
        if not value or SEPARATOR in value:
            raise ValueError(f"must be non-empty and free of {SEPARATOR!r}, got {value!r}")
        return value

    @property
    def center(self) -> GeoPoint:
        return GeoPoint(lat=self.lat, lng=self.lng)


class EncodeOptions(BaseModel):
    center: Optional[GeoPoint] = None
    region_level: int = 1
    precision_meters: float = Field(default=DEFAULT_PRECISION_METERS, gt=0)
    language: Language = Language.ENGLISH

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("language", mode="before")
    @classmethod
    def _parse_language(cls, value: Any) -> Language:
        return Language.parse(value)
