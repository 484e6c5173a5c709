from dataclasses import dataclass
from numbers import Real
from typing import Any, Dict, Optional, Union


class MalformedPayload(ValueError):
    """Raised when an upstream body lacks a field the snapshot requires."""


def celsius_to_fahrenheit(temp_c: float) -> float:
    return temp_c * 9 / 5 + 32


@dataclass(frozen=True)
class WeatherSnapshot:
    location: str
    condition: str
    temp_c: float
    humidity: int
    wind_mph: float
    region: Optional[str] = None
    country: Optional[str] = None
    localtime: Optional[str] = None
    icon_url: Optional[str] = None
    feelslike_c: Optional[float] = None
    wind_kph: Optional[float] = None
    last_updated: Optional[str] = None

    @property
    def temp_f(self) -> float:
        # derived on every access, never stored
        return celsius_to_fahrenheit(self.temp_c)

    @property
    def feelslike_f(self) -> Optional[float]:
        if self.feelslike_c is None:
            return None
        return celsius_to_fahrenheit(self.feelslike_c)


def _number(value: Any, field_name: str) -> float:
    # bool is a Real subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, Real):
        raise MalformedPayload(f"field '{field_name}' is not numeric: {value!r}")
    return value


def _text(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise MalformedPayload(f"field '{field_name}' is missing or empty")
    return value


def _optional(section: Dict[str, Any], key: str) -> Optional[str]:
    # extras are display-only: anything but a non-empty string is dropped
    value = section.get(key)
    if not isinstance(value, str) or not value.strip():
        return None
    return value


def _icon_url(raw: Any) -> Optional[str]:
    # WeatherAPI returns protocol-relative icon links ("//cdn.weatherapi.com/...")
    if not isinstance(raw, str) or not raw.strip():
        return None
    return f"https:{raw}" if raw.startswith("//") else raw


def snapshot_from_payload(payload: Dict[str, Any]) -> WeatherSnapshot:
    """Build a snapshot from a WeatherAPI `current.json` body.

    Expected shape (only the required fields are listed)::

        {"location": {"name": ...},
         "current": {"temp_c": ..., "humidity": ..., "wind_mph": ...,
                     "condition": {"text": ...}}}
    """
    if not isinstance(payload, dict):
        raise MalformedPayload("response body is not a JSON object")
    location = payload.get("location")
    current = payload.get("current")
    if not isinstance(location, dict) or not isinstance(current, dict):
        raise MalformedPayload("response body lacks 'location' or 'current'")
    condition = current.get("condition")
    if not isinstance(condition, dict):
        raise MalformedPayload("response body lacks 'current.condition'")

    feelslike = current.get("feelslike_c")
    wind_kph = current.get("wind_kph")
    return WeatherSnapshot(
        location=_text(location.get("name"), "location.name"),
        condition=_text(condition.get("text"), "current.condition.text"),
        temp_c=_number(current.get("temp_c"), "current.temp_c"),
        humidity=_number(current.get("humidity"), "current.humidity"),
        wind_mph=_number(current.get("wind_mph"), "current.wind_mph"),
        region=_optional(location, "region"),
        country=_optional(location, "country"),
        localtime=_optional(location, "localtime"),
        icon_url=_icon_url(condition.get("icon")),
        feelslike_c=_number(feelslike, "current.feelslike_c") if feelslike is not None else None,
        wind_kph=_number(wind_kph, "current.wind_kph") if wind_kph is not None else None,
        last_updated=_optional(current, "last_updated"),
    )


# --- Display view state (tagged union) ---

@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class FetchFailed:
    message: str


@dataclass(frozen=True)
class Loaded:
    snapshot: WeatherSnapshot


ViewState = Union[Loading, FetchFailed, Loaded]
