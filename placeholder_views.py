"""
Placeholder views chosen by the loading state
"""
import streamlit as st

from models import LoadingState

PLACEHOLDER_TEXT = {
    LoadingState.LOADING: "Loading...",
    LoadingState.SUCCESS: "Success!",
    LoadingState.FAILED: "Failed.",
}


def placeholder_text(state: LoadingState) -> str:
    """Return the fixed text shown for a loading state"""
    if not isinstance(state, LoadingState):
        raise ValueError(f"Not a loading state: {state!r}")
    return PLACEHOLDER_TEXT[state]


def render_placeholder(state: LoadingState, container=st) -> None:
    container.write(placeholder_text(state))
