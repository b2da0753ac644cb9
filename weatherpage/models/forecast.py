"""CWA forecast data models and the per-request fetch result."""

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias


@dataclass(frozen=True)
class ElementTime:
    start_time: str
    end_time: str
    parameter_name: str | None
    parameter_unit: str | None = None


@dataclass(frozen=True)
class ForecastElement:
    element_name: str
    times: list[ElementTime]


@dataclass(frozen=True)
class DisplayRecord:
    region_name: str
    description: str  # Wx
    precipitation_probability: str  # PoP
    min_temperature: str  # MinT
    max_temperature: str  # MaxT
    comfort_index: str  # CI


class NoDataReason(StrEnum):
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    MALFORMED = "malformed"
    EMPTY = "empty"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class WeatherFound:
    record: DisplayRecord


@dataclass(frozen=True)
class NoData:
    region: str
    reason: NoDataReason
    detail: str = ""


ForecastResult: TypeAlias = WeatherFound | NoData
