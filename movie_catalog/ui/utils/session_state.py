"""
Session state helpers for Streamlit.
"""

import streamlit as st

from movie_catalog.ui.utils.view_model import CatalogView


def get_view() -> CatalogView:
    """Get this session's catalog view model."""
    return st.session_state["catalog_view"]


def get_editing() -> dict | None:
    """Get the movie open in the form (empty dict for a new one), or None."""
    return st.session_state.get("editing_movie")


def open_form(movie: dict | None = None) -> None:
    """Open the add/edit form, pre-filled with ``movie`` when editing."""
    st.session_state["editing_movie"] = dict(movie) if movie else {}


def close_form() -> None:
    st.session_state["editing_movie"] = None


def init_session_state() -> None:
    """Initialize session state keys if not present."""
    if "catalog_view" not in st.session_state:
        st.session_state["catalog_view"] = CatalogView()
    if "needs_refresh" not in st.session_state:
        st.session_state["needs_refresh"] = True
    if "editing_movie" not in st.session_state:
        st.session_state["editing_movie"] = None
