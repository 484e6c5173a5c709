import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://api.weatherapi.com/v1"


def _secret(name: str) -> str:
    """Read a value from Streamlit secrets; empty string when no secrets file exists."""
    try:
        import streamlit as st
        return str(st.secrets.get(name, "") or "")
    except FileNotFoundError:
        return ""


def _timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"WEATHER_API_TIMEOUT must be a number of seconds, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"WEATHER_API_TIMEOUT must be positive, got {raw!r}")
    return value


@dataclass(frozen=True)
class Settings:
    weather_api_key: str
    weather_api_base_url: str = DEFAULT_BASE_URL
    weather_api_timeout: Optional[float] = None
    log_level: str = "INFO"

    @classmethod
    def load(cls) -> "Settings":
        load_dotenv()
        api_key = os.getenv("WEATHER_API_KEY") or _secret("WEATHER_API_KEY")
        return cls(
            weather_api_key=api_key.strip(),
            weather_api_base_url=os.getenv(
                "WEATHER_API_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            weather_api_timeout=_timeout(os.getenv("WEATHER_API_TIMEOUT")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
