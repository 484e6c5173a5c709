import logging
from typing import Callable

from domain.constants import FETCH_ERROR_MESSAGE
from domain.models import FetchFailed, Loaded, ViewState, WeatherSnapshot
from services.weather_api import WeatherFetchError

logger = logging.getLogger(__name__)


def resolve_view_state(city: str, fetcher: Callable[[str], WeatherSnapshot]) -> ViewState:
    """Run the single fetch for `city` and map its outcome to a terminal view state.

    Failures are logged with their kind; the user only ever sees the generic message.
    """
    try:
        snapshot = fetcher(city)
    except WeatherFetchError as e:
        logger.warning("Weather lookup for %r failed (%s): %s", city, e.kind, e)
        return FetchFailed(FETCH_ERROR_MESSAGE)
    return Loaded(snapshot)
