"""
Movie table and delete confirmation components.
"""

from typing import Callable

import streamlit as st

from movie_catalog.ui.utils.view_model import CatalogView, PendingDelete


def sync_selection(view: CatalogView, movie_id: str, widget_state) -> None:
    """Copy a row checkbox value into the view selection."""
    view.set_selected(movie_id, bool(widget_state.get(f"select_{movie_id}", False)))


def render_movie_table(
    view: CatalogView,
    on_edit: Callable[[dict], None],
    on_delete: Callable[[str], None],
) -> None:
    """
    Render the filtered movies with a select checkbox and row actions.

    Args:
        view: Session view model; checkbox changes update its selection
        on_edit: Called with the movie dict when Edit is clicked
        on_delete: Called with the movie id when Delete is clicked
    """
    if not view.filtered:
        st.info("No movies to show.")
        return

    widths = [1, 3, 5, 4, 1, 1]
    header = st.columns(widths)
    for col, title in zip(header, ["Select", "Movie", "Description", "Cast", "", ""]):
        col.markdown(f"**{title}**")

    for movie in view.filtered:
        movie_id = movie["id"]
        cols = st.columns(widths)
        cols[0].checkbox(
            "Select",
            value=movie_id in view.selected,
            key=f"select_{movie_id}",
            label_visibility="collapsed",
            on_change=sync_selection,
            args=(view, movie_id, st.session_state),
        )
        cols[1].write(movie["movie_name"])
        cols[2].write(movie["description"])
        cols[3].write(movie["casting"])
        if cols[4].button("Edit", key=f"edit_{movie_id}"):
            on_edit(movie)
        if cols[5].button("Delete", key=f"delete_{movie_id}"):
            on_delete(movie_id)


def render_delete_confirmation(pending: PendingDelete) -> bool | None:
    """
    Ask the user to confirm a pending deletion.

    Returns:
        True if confirmed, False if cancelled, None while undecided
    """
    if pending.bulk:
        question = f"Are you sure you want to delete {len(pending.ids)} selected movies?"
    else:
        question = "Are you sure you want to delete this movie?"
    st.warning(question)
    col1, col2 = st.columns(2)
    with col1:
        if st.button("Yes, delete", key="confirm_delete", type="primary"):
            return True
    with col2:
        if st.button("Cancel", key="cancel_delete"):
            return False
    return None
