import logging

import streamlit as st

from domain.constants import APP_TITLE, EMPTY_CITY_MESSAGE, WEATHER_ROUTE
from services.navigation import navigate, validate_city
from ui.components import page_header

logger = logging.getLogger(__name__)


def view():
    page_header(APP_TITLE, "Enter a city to see its current weather.")

    with st.form("form_city", clear_on_submit=False):
        raw_city = st.text_input("City", key="city_text", placeholder="e.g. Chennai")
        submitted = st.form_submit_button("Get weather")

    if not submitted:
        return

    city = validate_city(raw_city)
    if city is None:
        # recovered in place: no navigation
        st.error(EMPTY_CITY_MESSAGE)
        return

    logger.info("City submitted: %r", city)
    navigate(st.session_state, WEATHER_ROUTE, city=city)
    st.rerun()
