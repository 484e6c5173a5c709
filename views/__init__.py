"""View modules for manual routing.

The app uses a custom router in `app.py` instead of Streamlit's automatic
multi-page system. Each view lives under `views/` and exposes a `view()`
function:

- `city_input`: the search form (root route).
- `weather_display`: current conditions for the city handed over by the form.

Register any new view in `PAGE_REGISTRY` inside `app.py`.
"""
