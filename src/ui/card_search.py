from __future__ import annotations

from collections.abc import Callable

import streamlit as st

from src.api.units import toggle_label
from src.viewmodels.presentation import PresentationState

CITY_INPUT_KEY = "city_input"


def card_search(
    state: PresentationState,
    on_search: Callable[[], None],
    on_locate: Callable[[], None],
    on_toggle: Callable[[], None],
) -> None:
    """Search field, location button and the °F/°C switch.

    Actions run as on_click callbacks, i.e. before the rest of the script,
    so the unit button label below already reflects a toggle.
    """
    # a form submits on Enter as well as on the button
    with st.form("search-form", clear_on_submit=False, border=False):
        col_input, col_btn = st.columns([5, 1], gap="small")
        with col_input:
            st.text_input(
                "City",
                key=CITY_INPUT_KEY,
                placeholder="Search for a city, e.g. Paris",
                label_visibility="collapsed",
            )
        with col_btn:
            st.form_submit_button("Search", on_click=on_search, use_container_width=True)

    col_geo, col_unit = st.columns(2, gap="small")
    with col_geo:
        st.button("📍 Use my location", key="geo-btn", on_click=on_locate, use_container_width=True)
    with col_unit:
        st.button(
            toggle_label(state.unit),
            key="unit-btn",
            on_click=on_toggle,
            use_container_width=True,
        )
