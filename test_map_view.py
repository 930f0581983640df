"""
Tests for the location map markers and tap handling
"""
import pytest

from map_view import (
    LAST_TAPPED_KEY, LAYER_ID, MAP_KEY, SELECTED_KEY, build_deck, build_markers, close_detail,
    current_detail, handle_marker_tap, process_map_event, selected_location, zoom_for_span,
)
from models import LOCATIONS, LONDON_REGION


def tap_event(location):
    return {"selection": {"indices": {LAYER_ID: [0]}, "objects": {LAYER_ID: [{"id": str(location.id), "name": location.name}]}}}


def test_one_marker_per_location():
    markers = build_markers(LOCATIONS)

    assert len(markers) == 2
    rows = {row["name"]: (row["latitude"], row["longitude"]) for _, row in markers.iterrows()}
    assert rows == {
        "Buckingham Palace": (51.501, -0.141),
        "Tower of London": (51.508, -0.076),
    }


def test_no_locations_gives_empty_markers():
    markers = build_markers([])
    assert markers.empty
    assert list(markers.columns) == ["id", "name", "latitude", "longitude"]


def test_zoom_for_span():
    assert zoom_for_span(0.2, 0.2) == pytest.approx(10.81, abs=0.01)
    assert zoom_for_span(0.1, 0.4) == zoom_for_span(0.4, 0.4)


def test_zoom_rejects_empty_span():
    with pytest.raises(ValueError):
        zoom_for_span(0, 0)


def test_deck_centred_on_region():
    deck = build_deck(LOCATIONS, LONDON_REGION)

    assert deck.initial_view_state.latitude == 51.5
    assert deck.initial_view_state.longitude == -0.12
    assert len(deck.layers) == 1
    assert deck.layers[0].id == LAYER_ID


def test_selected_location_from_event():
    assert selected_location(tap_event(LOCATIONS[1]), LOCATIONS) is LOCATIONS[1]


@pytest.mark.parametrize("event", [None, {}, {"selection": {"indices": {}, "objects": {}}}])
def test_empty_selection(event):
    assert selected_location(event, LOCATIONS) is None


def test_tap_logs_and_navigates(session_state, capsys):
    handle_marker_tap(LOCATIONS[0], session_state=session_state)

    assert capsys.readouterr().out.strip() == "Tapped on Buckingham Palace"
    assert current_detail(LOCATIONS, session_state=session_state) is LOCATIONS[0]


def test_tap_without_navigation_only_logs(session_state, capsys):
    handle_marker_tap(LOCATIONS[1], navigate=False, session_state=session_state)

    assert capsys.readouterr().out.strip() == "Tapped on Tower of London"
    assert current_detail(LOCATIONS, session_state=session_state) is None


def test_same_selection_is_handled_once(session_state, capsys):
    event = tap_event(LOCATIONS[1])

    assert process_map_event(event, LOCATIONS, navigate=False, session_state=session_state) is LOCATIONS[1]
    assert process_map_event(event, LOCATIONS, navigate=False, session_state=session_state) is None

    assert capsys.readouterr().out.count("Tapped on Tower of London") == 1


def test_cleared_selection_allows_new_tap(session_state, capsys):
    event = tap_event(LOCATIONS[0])
    process_map_event(event, LOCATIONS, navigate=False, session_state=session_state)
    process_map_event({}, LOCATIONS, navigate=False, session_state=session_state)
    process_map_event(event, LOCATIONS, navigate=False, session_state=session_state)

    assert capsys.readouterr().out.count("Tapped on Buckingham Palace") == 2


def test_close_detail_resets_navigation(session_state):
    session_state[MAP_KEY] = {"selection": {}}
    process_map_event(tap_event(LOCATIONS[0]), LOCATIONS, session_state=session_state)
    assert SELECTED_KEY in session_state

    close_detail(session_state=session_state)

    assert SELECTED_KEY not in session_state
    assert LAST_TAPPED_KEY not in session_state
    assert MAP_KEY not in session_state
    assert current_detail(LOCATIONS, session_state=session_state) is None
