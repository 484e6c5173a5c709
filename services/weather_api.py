"""Client for the WeatherAPI.com "current conditions" endpoint.

`fetch_current` performs exactly one GET per call: no retry, no backoff and,
unless configured, no timeout. Every failure mode is raised as a
`WeatherFetchError` subclass so callers need a single except clause.
"""
import logging
from typing import Optional

import requests

from config.settings import Settings
from domain.constants import NO_LOCATION_FOUND_CODE
from domain.models import MalformedPayload, WeatherSnapshot, snapshot_from_payload

logger = logging.getLogger(__name__)

CURRENT_PATH = "/current.json"


class WeatherFetchError(Exception):
    """Base class for any failure to obtain a weather snapshot."""

    kind = "error"


class MissingApiKeyError(WeatherFetchError):
    kind = "missing_api_key"


class LocationNotFoundError(WeatherFetchError):
    kind = "not_found"


class UpstreamError(WeatherFetchError):
    kind = "upstream"

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(WeatherFetchError):
    kind = "malformed"


def _upstream_error_code(response: requests.Response) -> Optional[int]:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        return body["error"].get("code")
    return None


def _raise_for_status(response: requests.Response, city: str):
    if response.ok:
        return
    status = response.status_code
    if status == 404 or (status == 400 and _upstream_error_code(response) == NO_LOCATION_FOUND_CODE):
        raise LocationNotFoundError(f"no location found for {city!r}")
    raise UpstreamError(f"weather API responded with HTTP {status}", status_code=status)


def fetch_current(city: str, settings: Settings) -> WeatherSnapshot:
    if not city or not city.strip():
        raise ValueError("city must be a non-empty string")
    if not settings.weather_api_key:
        raise MissingApiKeyError("WEATHER_API_KEY is not configured")

    url = settings.weather_api_base_url + CURRENT_PATH
    params = {"key": settings.weather_api_key, "q": city}
    logger.info("Requesting current weather for %r", city)
    try:
        response = requests.get(url, params=params, timeout=settings.weather_api_timeout)
    except requests.RequestException as e:
        # the exception text may contain the full URL, including the key
        raise UpstreamError(f"request failed: {type(e).__name__}") from e

    _raise_for_status(response, city)

    try:
        payload = response.json()
    except ValueError as e:
        raise MalformedResponseError("response body is not valid JSON") from e
    try:
        snapshot = snapshot_from_payload(payload)
    except MalformedPayload as e:
        raise MalformedResponseError(str(e)) from e

    logger.info("Received weather for %s: %s, %.1f°C", snapshot.location, snapshot.condition, snapshot.temp_c)
    return snapshot
