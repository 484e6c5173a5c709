"""Route changes and the one-shot city payload, kept on a session-state mapping.

Views pass `st.session_state`; tests pass a plain dict.
"""
from typing import Any, Mapping, MutableMapping, Optional

from domain.constants import CITY_KEY, DEFAULT_ROUTE, NAV_TARGET_KEY, PAGE_PARAM


def validate_city(raw: Optional[str]) -> Optional[str]:
    """Return the trimmed city name, or None when nothing but whitespace was entered."""
    city = (raw or "").strip()
    return city or None


def navigate(state: MutableMapping[str, Any], route: str, city: Optional[str] = None):
    state[NAV_TARGET_KEY] = route
    if city is None:
        state.pop(CITY_KEY, None)
    else:
        state[CITY_KEY] = city


def take_city(state: MutableMapping[str, Any]) -> Optional[str]:
    """Pop the city handed over by the last navigation; a second call returns None."""
    return validate_city(state.pop(CITY_KEY, None))


def resolve_route(state: MutableMapping[str, Any], query_params: Mapping[str, Any], known_routes) -> str:
    """Pick the route to render for this run.

    A pending navigation target wins over the `page` query parameter; anything
    unknown falls back to the default route.
    """
    target = state.pop(NAV_TARGET_KEY, None)
    if target is None:
        target = query_params.get(PAGE_PARAM)
    if target not in known_routes:
        return DEFAULT_ROUTE
    return target
