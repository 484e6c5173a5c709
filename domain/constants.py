"""
Centralized constants shared by the router, the views and the API client,
so route keys and user-facing messages have a single source of truth.
"""

# Route keys registered in app.PAGE_REGISTRY
INPUT_ROUTE = "city_input"
WEATHER_ROUTE = "weather_display"
DEFAULT_ROUTE = INPUT_ROUTE

# Session state keys
NAV_TARGET_KEY = "nav_target"
CITY_KEY = "pending_city"
CURRENT_ROUTE_KEY = "current_route"
SETTINGS_KEY = "settings"

# Query parameter mirroring the active route
PAGE_PARAM = "page"

APP_TITLE = "City Weather"

# User-facing messages
EMPTY_CITY_MESSAGE = "Please enter a city name."
FETCH_ERROR_MESSAGE = "Could not fetch weather data. Please try again."
LOADING_MESSAGE = "Fetching current weather..."

# WeatherAPI.com error code for "No location found matching parameter 'q'"
NO_LOCATION_FOUND_CODE = 1006
