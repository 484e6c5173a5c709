from unittest.mock import MagicMock, patch

from config.settings import Settings
from domain.constants import FETCH_ERROR_MESSAGE
from domain.models import FetchFailed, Loaded, snapshot_from_payload
from services.view_state import resolve_view_state
from services.weather_api import LocationNotFoundError, MalformedResponseError, UpstreamError, fetch_current
from payloads import MINIMAL, make_payload


def test_success_resolves_to_loaded():
    snap = snapshot_from_payload(MINIMAL)
    fetcher = MagicMock(return_value=snap)
    state = resolve_view_state("Chennai", fetcher)
    assert state == Loaded(snap)
    fetcher.assert_called_once_with("Chennai")


def test_every_failure_kind_gets_the_same_message():
    for err in (LocationNotFoundError("x"), UpstreamError("y", 500), MalformedResponseError("z")):
        state = resolve_view_state("Chennai", MagicMock(side_effect=err))
        assert state == FetchFailed(FETCH_ERROR_MESSAGE)


def test_odd_icon_value_still_loads():
    resp = MagicMock(status_code=200, ok=True)
    resp.json.return_value = make_payload(condition={"text": "Sunny", "icon": 5})
    with patch("services.weather_api.requests.get", return_value=resp):
        state = resolve_view_state("Chennai", lambda c: fetch_current(c, Settings(weather_api_key="k")))
    assert isinstance(state, Loaded)
    assert state.snapshot.icon_url is None
