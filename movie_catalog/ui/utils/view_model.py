"""
Client-side view model for the catalog page.

Holds the last full fetch, the filtered view derived from it, the set of
checked ids for bulk deletion and any deletion waiting for confirmation.
"""

from dataclasses import dataclass, field


SEARCH_FIELDS = ("movie_name", "description", "casting")


def filter_movies(movies: list[dict], query: str) -> list[dict]:
    """
    Case-insensitive substring match of ``query`` against every content field.

    An empty query matches everything.
    """
    needle = (query or "").lower()
    if not needle:
        return list(movies)
    return [
        movie for movie in movies
        if any(needle in str(movie.get(name) or "").lower() for name in SEARCH_FIELDS)
    ]


@dataclass
class PendingDelete:
    """A deletion the user still has to confirm."""

    ids: list[str]
    bulk: bool = False


@dataclass
class CatalogView:
    """Per-session state of the catalog page."""

    movies: list[dict] = field(default_factory=list)
    filtered: list[dict] = field(default_factory=list)
    selected: set[str] = field(default_factory=set)
    query: str = ""
    pending: PendingDelete | None = None

    def load(self, movies: list[dict]) -> None:
        """Replace the cached record set with a fresh fetch."""
        self.movies = list(movies)
        ids = {movie["id"] for movie in self.movies}
        self.selected &= ids
        self.apply_filter(self.query)

    def apply_filter(self, query: str) -> list[dict]:
        self.query = query or ""
        self.filtered = filter_movies(self.movies, self.query)
        return self.filtered

    def toggle(self, movie_id: str) -> bool:
        """Flip the checked state of a movie; returns the new state."""
        if movie_id in self.selected:
            self.selected.discard(movie_id)
            return False
        self.selected.add(movie_id)
        return True

    def set_selected(self, movie_id: str, checked: bool) -> None:
        if checked:
            self.selected.add(movie_id)
        else:
            self.selected.discard(movie_id)

    def clear_selection(self) -> None:
        self.selected.clear()

    def request_delete(self, movie_id: str) -> None:
        self.pending = PendingDelete(ids=[movie_id])

    def request_bulk_delete(self) -> bool:
        """
        Ask for confirmation to delete every checked movie.

        Returns:
            False when nothing is selected, in which case nothing is pending
        """
        if not self.selected:
            self.pending = None
            return False
        self.pending = PendingDelete(ids=sorted(self.selected), bulk=True)
        return True

    def confirm(self) -> PendingDelete | None:
        """Take the pending deletion so the caller can issue the request."""
        pending, self.pending = self.pending, None
        return pending

    def cancel(self) -> None:
        self.pending = None

    def find(self, movie_id: str) -> dict | None:
        return next((movie for movie in self.movies if movie["id"] == movie_id), None)
