import html

import streamlit as st

from domain.models import WeatherSnapshot
from utils.formatting import format_humidity, format_place, format_temperature, format_wind

from .base import inject_base_css


def weather_card(snapshot: WeatherSnapshot):
    """
    Displays the current conditions for one snapshot.

    Temperatures are shown in both units with one decimal place.
    """
    inject_base_css()
    with st.container(border=True):
        head_cols = st.columns([1, 5])
        if snapshot.icon_url:
            head_cols[0].image(snapshot.icon_url, width=64)
        head_cols[1].markdown(
            f"""
            <div class="weather-card">
                <p class="place">{html.escape(format_place(snapshot))}</p>
                <span class="condition">{html.escape(snapshot.condition)}</span>
            </div>
            """,
            unsafe_allow_html=True
        )

        c1, c2, c3 = st.columns(3)
        c1.metric("Temperature", format_temperature(snapshot.temp_c, snapshot.temp_f))
        c2.metric("Humidity", format_humidity(snapshot.humidity))
        c3.metric("Wind", format_wind(snapshot.wind_mph, snapshot.wind_kph))

        if snapshot.feelslike_c is not None:
            st.caption(f"Feels like {format_temperature(snapshot.feelslike_c, snapshot.feelslike_f)}")
        meta = []
        if snapshot.localtime:
            meta.append(f"Local time: {snapshot.localtime}")
        if snapshot.last_updated:
            meta.append(f"Updated: {snapshot.last_updated}")
        if meta:
            st.markdown(f"<div class='weather-meta'>{html.escape(' | '.join(meta))}</div>", unsafe_allow_html=True)


def error_panel(message: str):
    """Single generic failure message with no detail about the failure kind."""
    inject_base_css()
    with st.container(border=True):
        st.markdown("<span class='error-pill'>Error</span>", unsafe_allow_html=True)
        st.error(message)
