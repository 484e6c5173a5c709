from typing import Optional

from domain.models import WeatherSnapshot


def _trim(value: float) -> str:
    # 5.0 -> "5", 5.6 -> "5.6"
    return str(int(value)) if float(value).is_integer() else f"{value:.1f}"


def format_temperature(temp_c: float, temp_f: float) -> str:
    return f"{temp_c:.1f}°C / {temp_f:.1f}°F"


def format_humidity(humidity: float) -> str:
    return f"{_trim(humidity)}%"


def format_wind(wind_mph: float, wind_kph: Optional[float] = None) -> str:
    text = f"{_trim(wind_mph)} mph"
    if wind_kph is not None:
        text += f" ({_trim(wind_kph)} km/h)"
    return text


def format_place(snapshot: WeatherSnapshot) -> str:
    parts = [snapshot.location]
    for extra in (snapshot.region, snapshot.country):
        if extra and extra not in parts:
            parts.append(extra)
    return ", ".join(parts)
