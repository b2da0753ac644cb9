"""Forecast fetcher: retrieves CWA forecasts and maps them to display records."""

import logging

import httpx

from weatherpage.ingest.cwa_client import CwaClient
from weatherpage.ingest.response_cache import ResponseCache
from weatherpage.models.common import PLACEHOLDER, Region
from weatherpage.models.forecast import (
    DisplayRecord,
    ElementTime,
    ForecastElement,
    ForecastResult,
    NoData,
    NoDataReason,
    WeatherFound,
)

logger = logging.getLogger(__name__)

_KNOWN_REGIONS = frozenset(r.value for r in Region)


class MalformedResponse(ValueError):
    """Upstream body parsed as JSON but is not shaped like a datastore reply."""


class ForecastFetcher:
    def __init__(self, client: CwaClient, cache: ResponseCache | None = None):
        self.client = client
        self.cache = cache

    def fetch(self, region: str) -> ForecastResult:
        """Fetch the forecast for a region and build its display record.

        Every failure is reported as NoData; nothing is raised to the caller.
        """
        try:
            locations = self._get_locations(region)
        except httpx.HTTPStatusError as e:
            logger.error(
                "CWA API returned %d for %s", e.response.status_code, region
            )
            return NoData(region, NoDataReason.HTTP_STATUS, str(e))
        except httpx.RequestError as e:
            logger.error("CWA API request failed for %s: %s", region, e)
            return NoData(region, NoDataReason.TRANSPORT, str(e))
        except MalformedResponse as e:
            logger.error("Unexpected CWA response shape for %s: %s", region, e)
            return NoData(region, NoDataReason.MALFORMED, str(e))
        except ValueError as e:
            logger.error("CWA API returned a non-JSON body for %s: %s", region, e)
            return NoData(region, NoDataReason.MALFORMED, str(e))
        except Exception as e:
            logger.exception("Failed to fetch forecast for %s", region)
            return NoData(region, NoDataReason.UNEXPECTED, str(e))

        if not locations:
            logger.warning("No data found for location: %s", region)
            return NoData(region, NoDataReason.EMPTY)

        return WeatherFound(build_display_record(locations[0], region))

    def clear_cache(self) -> None:
        if self.cache is not None:
            self.cache.clear()

    def _get_locations(self, region: str) -> list:
        """Location list for a region, reused from the cache while fresh.

        Only well-formed replies for one of the fixed regions are cached.
        """
        if self.cache is not None:
            cached = self.cache.get(region)
            if cached is not None:
                logger.debug("Cache hit for %s", region)
                return cached

        locations = _extract_locations(self.client.get_forecast(region))
        if self.cache is not None and region in _KNOWN_REGIONS:
            self.cache.put(region, locations)
        return locations


def _extract_locations(payload: object) -> list:
    if not isinstance(payload, dict):
        raise MalformedResponse("body is not a JSON object")
    records = payload.get("records")
    if not isinstance(records, dict):
        raise MalformedResponse("missing 'records' object")
    locations = records.get("location")
    if not isinstance(locations, list):
        raise MalformedResponse("missing 'records.location' list")
    if locations and not isinstance(locations[0], dict):
        raise MalformedResponse("location entry is not an object")
    return locations


def parse_elements(location: dict) -> list[ForecastElement]:
    """Parse a location's weatherElement list, skipping entries that are not objects."""
    raw_elements = location.get("weatherElement")
    if not isinstance(raw_elements, list):
        return []

    elements: list[ForecastElement] = []
    for el in raw_elements:
        if not isinstance(el, dict):
            continue
        raw_times = el.get("time")
        times: list[ElementTime] = []
        if isinstance(raw_times, list):
            for t in raw_times:
                if not isinstance(t, dict):
                    continue
                parameter = t.get("parameter")
                if not isinstance(parameter, dict):
                    parameter = {}
                times.append(
                    ElementTime(
                        start_time=str(t.get("startTime", "")),
                        end_time=str(t.get("endTime", "")),
                        parameter_name=_as_text(parameter.get("parameterName")),
                        parameter_unit=_as_text(parameter.get("parameterUnit")),
                    )
                )
        elements.append(ForecastElement(str(el.get("elementName", "")), times))
    return elements


def element_value(elements: list[ForecastElement], name: str) -> str:
    """First time entry's parameterName of the first element called ``name``.

    Falls back to the placeholder when the element, its first time entry or
    the parameter itself is missing or empty.
    """
    element = next((el for el in elements if el.element_name == name), None)
    if element is None or not element.times:
        return PLACEHOLDER
    return element.times[0].parameter_name or PLACEHOLDER


def build_display_record(location: dict, requested_region: str) -> DisplayRecord:
    elements = parse_elements(location)
    region_name = _as_text(location.get("locationName")) or requested_region
    return DisplayRecord(
        region_name=region_name,
        description=element_value(elements, "Wx"),
        precipitation_probability=element_value(elements, "PoP"),
        min_temperature=element_value(elements, "MinT"),
        max_temperature=element_value(elements, "MaxT"),
        comfort_index=element_value(elements, "CI"),
    )


def _as_text(value: object) -> str | None:
    if value is None or isinstance(value, (dict, list)):
        return None
    return str(value)
