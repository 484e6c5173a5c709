import logging
import datetime as dt

import streamlit as st

from config.logging_config import setup_logging
from config.settings import Settings
from domain.constants import (
    APP_TITLE,
    CITY_KEY,
    CURRENT_ROUTE_KEY,
    INPUT_ROUTE,
    PAGE_PARAM,
    SETTINGS_KEY,
    WEATHER_ROUTE,
)
from services.navigation import resolve_route

# Import the page rendering functions from the view modules
from views import city_input, weather_display

logger = logging.getLogger(__name__)

# --- Page Registry ---
# Maps a route key to its label, rendering function, and whether the view
# needs a city handed over through navigation state.
PAGE_REGISTRY = {
    INPUT_ROUTE: {
        "label": "🔎 Search",
        "render_func": city_input.view,
        "requires_city": False,
    },
    WEATHER_ROUTE: {
        "label": "🌤️ Current weather",
        "render_func": weather_display.view,
        "requires_city": True,
    },
}


def main():
    """
    Main application router.

    Picks the route for this run (pending navigation first, then the `page`
    query parameter), mirrors it into the URL and renders the matching view.
    """
    st.set_page_config(page_title=APP_TITLE, page_icon="🌤️", layout="centered")
    settings = Settings.load()
    setup_logging(settings.log_level)
    # loaded once per run; views read it back from session state
    st.session_state[SETTINGS_KEY] = settings

    route = resolve_route(st.session_state, st.query_params, PAGE_REGISTRY)
    if PAGE_REGISTRY[route]["requires_city"] and CITY_KEY not in st.session_state:
        logger.info("No city for %s, redirecting to %s", route, INPUT_ROUTE)
        route = INPUT_ROUTE
    if st.session_state.get(CURRENT_ROUTE_KEY) != route:
        logger.info("Route -> %s", route)
    st.session_state[CURRENT_ROUTE_KEY] = route
    st.query_params[PAGE_PARAM] = route

    if not settings.weather_api_key:
        st.sidebar.warning("WEATHER_API_KEY is not set; lookups will fail.")

    # --- Page Rendering ---
    PAGE_REGISTRY[route]["render_func"]()

    # --- Footer ---
    st.sidebar.markdown("---")
    st.sidebar.caption(
        f"Data: WeatherAPI.com | {dt.datetime.now(dt.timezone.utc).strftime('%H:%M:%S')}Z"
    )


if __name__ == "__main__":
    main()
