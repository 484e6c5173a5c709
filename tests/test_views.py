from unittest.mock import MagicMock, patch

import pytest

from config.settings import Settings
from domain.constants import (
    CITY_KEY,
    EMPTY_CITY_MESSAGE,
    FETCH_ERROR_MESSAGE,
    INPUT_ROUTE,
    NAV_TARGET_KEY,
    SETTINGS_KEY,
    WEATHER_ROUTE,
)
from domain.models import snapshot_from_payload
from services.navigation import navigate
from services.weather_api import MalformedResponseError, UpstreamError
from views import city_input, weather_display
from payloads import MINIMAL


def make_st(session=None, text="", submitted=False):
    st = MagicMock()
    st.session_state = {} if session is None else session
    st.text_input.return_value = text
    st.form_submit_button.return_value = submitted
    return st


# --- Input view ---

@pytest.mark.parametrize("text, expected", [("Chennai", "Chennai"), ("  Paris ", "Paris")])
def test_submit_navigates_with_trimmed_city(text, expected):
    st = make_st(text=text, submitted=True)
    with patch.object(city_input, "st", st), patch.object(city_input, "page_header"):
        city_input.view()
    assert st.session_state[NAV_TARGET_KEY] == WEATHER_ROUTE
    assert st.session_state[CITY_KEY] == expected
    st.rerun.assert_called_once()
    st.error.assert_not_called()


@pytest.mark.parametrize("text", ["", "   ", "\t"])
def test_blank_submit_shows_message_and_stays(text):
    st = make_st(text=text, submitted=True)
    with patch.object(city_input, "st", st), patch.object(city_input, "page_header"):
        city_input.view()
    st.error.assert_called_once_with(EMPTY_CITY_MESSAGE)
    assert NAV_TARGET_KEY not in st.session_state
    st.rerun.assert_not_called()


def test_form_without_submit_does_nothing():
    st = make_st(text="Chennai", submitted=False)
    with patch.object(city_input, "st", st), patch.object(city_input, "page_header"):
        city_input.view()
    assert st.session_state == {}
    st.error.assert_not_called()


# --- Display view ---

def _run_display(st, fetch):
    with patch.object(weather_display, "st", st), \
            patch.object(weather_display, "page_header"), \
            patch.object(weather_display, "weather_card") as card, \
            patch.object(weather_display, "error_panel") as panel, \
            patch.object(weather_display.Settings, "load", return_value=Settings(weather_api_key="k")), \
            patch.object(weather_display.weather_api, "fetch_current", fetch):
        weather_display.view()
    return card, panel


def test_display_without_city_redirects_to_input():
    st = make_st()
    fetch = MagicMock()
    card, panel = _run_display(st, fetch)
    assert st.session_state[NAV_TARGET_KEY] == INPUT_ROUTE
    st.rerun.assert_called_once()
    fetch.assert_not_called()
    card.assert_not_called()
    panel.assert_not_called()


def test_display_renders_card_on_success():
    snap = snapshot_from_payload(MINIMAL)
    st = make_st(session={CITY_KEY: "Chennai"})
    fetch = MagicMock(return_value=snap)
    card, panel = _run_display(st, fetch)
    fetch.assert_called_once()
    assert fetch.call_args[0][0] == "Chennai"
    card.assert_called_once_with(snap)
    panel.assert_not_called()
    # loading indicator shown before the result
    st.info.assert_called_once()
    # the city is consumed by this activation
    assert CITY_KEY not in st.session_state


@pytest.mark.parametrize("error", [UpstreamError("boom", 500), MalformedResponseError("bad body")])
def test_display_renders_generic_error_and_return_control(error):
    st = make_st(session={CITY_KEY: "Chennai"})
    card, panel = _run_display(st, MagicMock(side_effect=error))
    panel.assert_called_once_with(FETCH_ERROR_MESSAGE)
    card.assert_not_called()
    st.button.assert_called_once()
    kwargs = st.button.call_args.kwargs
    assert kwargs["on_click"] is navigate
    assert kwargs["args"][1] == INPUT_ROUTE


def test_render_state_rejects_unknown_state():
    with pytest.raises(TypeError):
        weather_display.render_state(object())


def test_display_shows_one_loading_indicator():
    st = make_st(session={CITY_KEY: "Chennai"})
    _run_display(st, MagicMock(return_value=snapshot_from_payload(MINIMAL)))
    st.info.assert_called_once()
    st.spinner.assert_not_called()


def test_display_reuses_settings_loaded_by_router():
    settings = Settings(weather_api_key="from-router")
    st = make_st(session={CITY_KEY: "Chennai", SETTINGS_KEY: settings})
    fetch = MagicMock(return_value=snapshot_from_payload(MINIMAL))
    with patch.object(weather_display, "st", st), \
            patch.object(weather_display, "page_header"), \
            patch.object(weather_display, "weather_card"), \
            patch.object(weather_display, "error_panel"), \
            patch.object(weather_display.Settings, "load") as load, \
            patch.object(weather_display.weather_api, "fetch_current", fetch):
        weather_display.view()
    load.assert_not_called()
    fetch.assert_called_once_with("Chennai", settings)
