"""Pydantic schemas for map regions and viewport options."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel

from overlap.schemas.venue import GeoPoint


class SearchBounds(BaseModel):
    """Rectangular search area given by its north-east and south-west corners."""

    northeast: GeoPoint
    southwest: GeoPoint

    model_config = {"frozen": True}

    def contains(self, point: GeoPoint) -> bool:
        return (
            self.southwest.latitude <= point.latitude <= self.northeast.latitude
            and self.southwest.longitude <= point.longitude <= self.northeast.longitude
        )


class MapRegion(BaseModel):
    """Camera region: a center plus the visible span on each axis, in degrees."""

    center: GeoPoint
    latitude_span: float = Field(gt=0.0, allow_inf_nan=False)
    longitude_span: float = Field(gt=0.0, allow_inf_nan=False)

    model_config = {"frozen": True}

    def to_bounds(self) -> SearchBounds:
        half_lat = self.latitude_span / 2
        half_lng = self.longitude_span / 2
        return SearchBounds.model_construct(
            northeast=GeoPoint.model_construct(
                longitude=self.center.longitude + half_lng,
                latitude=self.center.latitude + half_lat,
            ),
            southwest=GeoPoint.model_construct(
                longitude=self.center.longitude - half_lng,
                latitude=self.center.latitude - half_lat,
            ),
        )

    def contains(self, point: GeoPoint) -> bool:
        return self.to_bounds().contains(point)


class BoundsOptions(BaseModel):
    """Tuning for adaptive_bounds."""

    min_span: float = Field(default=0.1, gt=0.0)
    max_span: float = Field(default=5.0, gt=0.0)
    base_padding: float = Field(default=2.0, gt=0.0)  # unused once urban/rural is known
    urban_padding: float = Field(default=3.0, gt=0.0)
    rural_padding: float = Field(default=1.5, gt=0.0)
    # Region returned when there is nothing to frame
    default_center_latitude: float = Field(default=51.5074, ge=-90.0, le=90.0)
    default_center_longitude: float = Field(default=-0.1278, ge=-180.0, le=180.0)
    default_span: float = Field(default=0.8, gt=0.0, allow_inf_nan=False)

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @model_validator(mode="after")
    def _check_span_order(self) -> BoundsOptions:
        if self.min_span > self.max_span:
            raise ValueError("min_span must not exceed max_span")
        return self


class SearchBoundsOptions(BaseModel):
    """Buffer applied to a visible region before querying the match API."""

    buffer_multiplier: float = Field(default=1.3, gt=0.0)
    max_span: float = Field(default=10.0, gt=0.0)

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
