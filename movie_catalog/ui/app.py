"""
Streamlit main app for the Movie Catalog.

Run: streamlit run movie_catalog/ui/app.py --server.port 8501
"""

import logging
import sys
from pathlib import Path

import streamlit as st

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from movie_catalog.ui.utils import api_client
from movie_catalog.ui.utils.session_state import (
    close_form,
    get_editing,
    get_view,
    init_session_state,
    open_form,
)
from movie_catalog.ui.components.movie_form import render_movie_form
from movie_catalog.ui.components.movie_table import render_delete_confirmation, render_movie_table

logger = logging.getLogger(__name__)

st.set_page_config(
    page_title="Movie Catalog",
    page_icon="🎬",
    layout="wide",
)

init_session_state()
view = get_view()


def request_refresh(message: str | None = None) -> None:
    """Drop the cached catalog and refetch it on the next run."""
    st.session_state["needs_refresh"] = True
    if message:
        st.session_state["flash"] = message
    st.rerun()


if st.session_state["needs_refresh"]:
    try:
        view.load(api_client.list_movies())
    except Exception as e:
        logger.error("Failed to fetch movies: %s", e)
        st.error("Failed to load movies. Is the API running?")
        st.info("Start the API with: uvicorn movie_catalog.api.main:app --host 0.0.0.0 --port 8000")
    st.session_state["needs_refresh"] = False

st.title("🎬 Movie Application")

flash = st.session_state.pop("flash", None)
if flash:
    st.success(flash)

# Toolbar: search, add, bulk delete
col1, col2, col3 = st.columns([4, 1, 1])
with col1:
    query = st.text_input(
        "Search",
        placeholder="Search Movie Here",
        key="search_query",
        label_visibility="collapsed",
    )
    view.apply_filter(query)
with col2:
    if st.button("Add Movie", use_container_width=True):
        open_form()
with col3:
    if st.button("Delete Selected", use_container_width=True):
        if not view.request_bulk_delete():
            st.warning("No movies selected!")

# Spreadsheet import
with st.expander("Import from Excel"):
    uploaded = st.file_uploader("Select Excel File", type=["xlsx"])
    if st.button("Upload Excel"):
        if uploaded is None:
            st.warning("Please select an Excel file to upload!")
        else:
            result = None
            try:
                result = api_client.upload_spreadsheet(uploaded.name, uploaded.getvalue())
            except Exception as e:
                logger.error("Upload failed: %s", e)
                st.error("Failed to upload file.")
            if result is not None:
                request_refresh(f"File uploaded: {result.get('imported', 0)} movies added.")

# Delete confirmation
if view.pending is not None:
    decision = render_delete_confirmation(view.pending)
    if decision is False:
        view.cancel()
        st.rerun()
    elif decision:
        pending = view.confirm()
        deleted = False
        try:
            if pending.bulk:
                api_client.delete_movies(pending.ids)
                view.clear_selection()
            else:
                api_client.delete_movie(pending.ids[0])
            deleted = True
        except Exception as e:
            logger.error("Delete failed: %s", e)
            st.error("Failed to delete selected movies." if pending.bulk else "Failed to delete movie.")
        if deleted:
            request_refresh("Selected movies deleted." if pending.bulk else "Movie deleted.")

# Add/edit form
editing = get_editing()
if editing is not None:
    form_data = render_movie_form(editing)
    if form_data and form_data.get("cancelled"):
        close_form()
        request_refresh()
    elif form_data:
        fields = (form_data["movie_name"], form_data["description"], form_data["casting"])
        if not all(fields):
            st.error("All fields (Movie Name, Description, Casting) are required.")
        else:
            saved = False
            try:
                if form_data.get("id"):
                    api_client.update_movie(form_data["id"], *fields)
                else:
                    api_client.create_movie(*fields)
                saved = True
            except Exception as e:
                logger.error("Save failed: %s", e)
                st.error("Failed to save movie.")
            if saved:
                close_form()
                request_refresh("Movie saved.")

st.divider()


def edit_movie(movie: dict) -> None:
    open_form(movie)
    st.rerun()


def ask_delete(movie_id: str) -> None:
    view.request_delete(movie_id)
    st.rerun()


render_movie_table(view, on_edit=edit_movie, on_delete=ask_delete)
