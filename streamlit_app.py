"""
Main Streamlit Application Entry Point
"""
import streamlit as st
from streamlit.errors import StreamlitAPIException

from config import load_settings
from map_view import current_detail, render_location_detail, render_map
from models import LOCATIONS, LONDON_REGION, sorted_users
from placeholder_views import render_placeholder
from storage import save_and_load_message

# Page configuration - only set if not already configured
try:
    st.set_page_config(
        page_title="BucketList",
        page_icon="🗺️",
        layout="centered",
    )
except StreamlitAPIException:
    pass  # Page config already set

USERS = sorted_users()


def main():
    settings = load_settings()

    # Detail view replaces the main view while a location is selected
    detail = current_detail(LOCATIONS)
    if detail is not None:
        render_location_detail(detail)
        return

    st.title("🗺️ BucketList")

    for user in USERS:
        st.write(user.display_name)

    if st.button("Hello World!"):
        save_and_load_message()

    render_placeholder(settings.loading_state)

    render_map(LOCATIONS, LONDON_REGION, navigate=settings.navigate_on_tap)


if __name__ == "__main__":
    main()
