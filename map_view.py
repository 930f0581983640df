"""
Map of the bucket list locations with tappable markers
"""
import math
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd
import pydeck as pdk
import streamlit as st

from models import Location, MapRegion

MAP_KEY = "locations_map"
LAYER_ID = "locations"
SELECTED_KEY = "selected_location_id"
LAST_TAPPED_KEY = "last_tapped_location_id"

# Red ring, 44px across with a 3px stroke
MARKER_COLOR = [255, 0, 0]
MARKER_RADIUS_PX = 22
MARKER_LINE_WIDTH_PX = 3


def build_markers(locations: Sequence[Location]) -> pd.DataFrame:
    """One row per location, ready to hand to a pydeck layer"""
    return pd.DataFrame(
        [
            {
                'id': str(location.id),
                'name': location.name,
                'latitude': location.coordinate.latitude,
                'longitude': location.coordinate.longitude,
            }
            for location in locations
        ],
        columns=['id', 'name', 'latitude', 'longitude'],
    )


def zoom_for_span(latitude_delta: float, longitude_delta: float) -> float:
    """
    Convert a visible span in degrees to a web-map zoom level

    At zoom 0 one tile covers 360 degrees of longitude and every zoom level
    halves that, so the zoom is log2(360 / span) for the wider of the two spans.
    """
    span = max(latitude_delta, longitude_delta)
    if span <= 0:
        raise ValueError(f"Map span must be positive, got {span}")
    return math.log2(360.0 / span)


def build_deck(locations: Sequence[Location], region: MapRegion) -> pdk.Deck:
    """Build the map centred on region with one red ring per location"""
    layer = pdk.Layer(
        "ScatterplotLayer",
        data=build_markers(locations),
        id=LAYER_ID,
        get_position=["longitude", "latitude"],
        filled=False,
        stroked=True,
        get_line_color=MARKER_COLOR,
        line_width_units="pixels",
        get_line_width=MARKER_LINE_WIDTH_PX,
        radius_units="pixels",
        get_radius=MARKER_RADIUS_PX,
        pickable=True,
    )
    view_state = pdk.ViewState(
        latitude=region.center.latitude,
        longitude=region.center.longitude,
        zoom=zoom_for_span(region.latitude_delta, region.longitude_delta),
    )
    return pdk.Deck(layers=[layer], initial_view_state=view_state, tooltip={"text": "{name}"})


def selected_location(event: Any, locations: Sequence[Location]) -> Optional[Location]:
    """Return the location picked in a pydeck selection event, if any"""
    if not event:
        return None
    selection = event.get("selection") or {}
    objects: List[Dict[str, Any]] = (selection.get("objects") or {}).get(LAYER_ID) or []
    if not objects:
        return None

    picked_id = objects[0].get("id")
    for location in locations:
        if str(location.id) == picked_id:
            return location
    return None


def handle_marker_tap(location: Location, navigate: bool = True, session_state=None) -> None:
    """Log the tap and, when navigation is on, open the detail view for location"""
    if session_state is None:
        session_state = st.session_state

    print(f"Tapped on {location.name}")
    if navigate:
        session_state[SELECTED_KEY] = str(location.id)


def current_detail(locations: Sequence[Location], session_state=None) -> Optional[Location]:
    if session_state is None:
        session_state = st.session_state

    selected_id = session_state.get(SELECTED_KEY)
    if selected_id is None:
        return None
    for location in locations:
        if str(location.id) == selected_id:
            return location
    return None


def close_detail(session_state=None) -> None:
    """Return to the main view and reset the map selection"""
    if session_state is None:
        session_state = st.session_state

    session_state.pop(SELECTED_KEY, None)
    session_state.pop(LAST_TAPPED_KEY, None)
    session_state.pop(MAP_KEY, None)


def process_map_event(event: Any, locations: Sequence[Location], navigate: bool = True, session_state=None) -> Optional[Location]:
    """
    Turn a chart selection event into at most one tap per new selection

    Streamlit keeps the selection across reruns, so a tap is only handled when
    the picked location differs from the last one handled.
    """
    if session_state is None:
        session_state = st.session_state

    location = selected_location(event, locations)
    if location is None:
        session_state.pop(LAST_TAPPED_KEY, None)
        return None
    if session_state.get(LAST_TAPPED_KEY) == str(location.id):
        return None

    session_state[LAST_TAPPED_KEY] = str(location.id)
    handle_marker_tap(location, navigate=navigate, session_state=session_state)
    return location


def render_map(locations: Sequence[Location], region: MapRegion, navigate: bool = True) -> None:
    event = st.pydeck_chart(
        build_deck(locations, region),
        on_select="rerun",
        selection_mode="single-object",
        key=MAP_KEY,
    )
    if process_map_event(event, locations, navigate=navigate) is not None and navigate:
        st.rerun()


def render_location_detail(location: Location) -> None:
    st.button("← Back", on_click=close_detail)
    st.header(location.name)
