"""
Tests for the Streamlit API client, with ``requests`` patched out.
"""

from unittest.mock import MagicMock, patch

import pytest

from movie_catalog.ui.utils import api_client


@pytest.fixture
def mock_requests(monkeypatch):
    monkeypatch.setenv("API_BASE_URL", "http://api.test/")
    with patch.object(api_client, "requests") as mocked:
        response = MagicMock()
        response.json.return_value = {"ok": True}
        for method in ("get", "post", "patch", "delete"):
            getattr(mocked, method).return_value = response
        yield mocked


class TestApiClient:
    """Each helper hits the right endpoint with the right payload."""

    def test_base_url_strips_slash(self, monkeypatch):
        monkeypatch.setenv("API_BASE_URL", "http://api.test/")
        assert api_client.get_api_base_url() == "http://api.test"

    def test_list_movies(self, mock_requests):
        assert api_client.list_movies() == {"ok": True}
        mock_requests.get.assert_called_once_with("http://api.test/api/movies", timeout=10)

    def test_create_movie(self, mock_requests):
        api_client.create_movie("Alpha", "First film", "Actor A")
        mock_requests.post.assert_called_once_with(
            "http://api.test/api/movies",
            json={"Movie_Name": "Alpha", "Description": "First film", "Casting": "Actor A"},
            timeout=10,
        )

    def test_update_movie_uses_patch(self, mock_requests):
        api_client.update_movie("abc", "Alpha", "First film", "Actor A")
        args, kwargs = mock_requests.patch.call_args
        assert args == ("http://api.test/api/movies/abc",)
        assert kwargs["json"]["Movie_Name"] == "Alpha"

    def test_delete_movie(self, mock_requests):
        api_client.delete_movie("abc")
        mock_requests.delete.assert_called_once_with("http://api.test/api/movies/abc", timeout=10)

    def test_delete_movies(self, mock_requests):
        api_client.delete_movies(["a", "b"])
        mock_requests.post.assert_called_once_with(
            "http://api.test/api/movies/delete-multiple",
            json={"ids": ["a", "b"]},
            timeout=10,
        )

    def test_upload_spreadsheet(self, mock_requests):
        api_client.upload_spreadsheet("movies.xlsx", b"data")
        args, kwargs = mock_requests.post.call_args
        assert args == ("http://api.test/api/movies/upload",)
        filename, content, _ = kwargs["files"]["file"]
        assert (filename, content) == ("movies.xlsx", b"data")

    def test_errors_propagate(self, mock_requests):
        mock_requests.get.return_value.raise_for_status.side_effect = RuntimeError("500")
        with pytest.raises(RuntimeError):
            api_client.list_movies()
