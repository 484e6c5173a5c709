import logging

import streamlit as st

from config.settings import Settings
from domain.constants import INPUT_ROUTE, LOADING_MESSAGE, SETTINGS_KEY
from domain.models import FetchFailed, Loaded, Loading, ViewState
from services import weather_api
from services.navigation import navigate, take_city
from services.view_state import resolve_view_state
from ui.components import error_panel, page_header, weather_card

logger = logging.getLogger(__name__)


def render_state(state: ViewState):
    if isinstance(state, Loading):
        st.info(LOADING_MESSAGE, icon="⏳")
    elif isinstance(state, Loaded):
        weather_card(state.snapshot)
    elif isinstance(state, FetchFailed):
        error_panel(state.message)
    else:
        raise TypeError(f"unknown view state: {state!r}")


def view():
    city = take_city(st.session_state)
    if city is None:
        # reached without a city (direct link, reload): back to the form
        logger.info("No city in navigation state, redirecting to %s", INPUT_ROUTE)
        navigate(st.session_state, INPUT_ROUTE)
        st.rerun()
        return

    settings = st.session_state.get(SETTINGS_KEY) or Settings.load()
    page_header(f"Weather in {city}")

    slot = st.empty()
    with slot.container():
        render_state(Loading())
    state = resolve_view_state(city, lambda c: weather_api.fetch_current(c, settings))
    with slot.container():
        render_state(state)

    st.button(
        "◀ Search again",
        key="btn_search_again",
        on_click=navigate,
        args=(st.session_state, INPUT_ROUTE),
    )
