"""
Add/edit movie form component.
"""

import streamlit as st


def render_movie_form(initial_data: dict | None = None) -> dict | None:
    """
    Render the movie add or edit form.

    Args:
        initial_data: Pre-fill form with this movie (movie_name, description,
            casting); a movie with an ``id`` is edited, otherwise added

    Returns:
        Form data dict if submitted, else None.
    """
    initial_data = initial_data or {}
    is_edit = bool(initial_data.get("id"))

    with st.form("movie_form", clear_on_submit=not is_edit):
        st.subheader("Edit movie" if is_edit else "Add movie")
        movie_name = st.text_input("Movie Name", value=initial_data.get("movie_name", ""))
        description = st.text_input("Description", value=initial_data.get("description", ""))
        casting = st.text_input("Casting", value=initial_data.get("casting", ""))
        col1, col2 = st.columns(2)
        with col1:
            submitted = st.form_submit_button("Save Movie" if is_edit else "Add Movie")
        with col2:
            cancelled = st.form_submit_button("Cancel")
    if cancelled:
        return {"cancelled": True}
    if submitted:
        return {
            "id": initial_data.get("id"),
            "movie_name": movie_name.strip(),
            "description": description.strip(),
            "casting": casting.strip(),
        }
    return None
