"""
API tests for movie endpoints.

Uses FastAPI TestClient with the database dependency pointed at a fresh
in-memory SQLite database per test.
"""

import io
import os

import pandas as pd
import pytest
from fastapi.testclient import TestClient

from movie_catalog.api.dependencies import get_db
from movie_catalog.api.main import app
from movie_catalog.database.connection import DatabaseManager

XLSX_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

MOVIE = {"Movie_Name": "Alpha", "Description": "First film", "Casting": "Actor A"}


def override_db(db_manager: DatabaseManager):
    def _get_db():
        with db_manager.session_scope() as session:
            yield session
    return _get_db


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    path = tmp_path / "uploads"
    monkeypatch.setenv("UPLOAD_DIR", str(path))
    return path


@pytest.fixture
def client(upload_dir):
    db_manager = DatabaseManager(db_path=":memory:")
    db_manager.create_tables()
    app.dependency_overrides[get_db] = override_db(db_manager)
    yield TestClient(app)
    app.dependency_overrides.clear()
    db_manager.close()


def xlsx(rows, columns=("Movie_Name", "Description", "Casting")) -> bytes:
    buffer = io.BytesIO()
    pd.DataFrame(rows, columns=list(columns)).to_excel(buffer, index=False)
    return buffer.getvalue()


def create(client, **overrides) -> dict:
    r = client.post("/api/movies", json={**MOVIE, **overrides})
    assert r.status_code == 200
    return r.json()


class TestMovieEndpoints:
    """Tests for list, get, create, update and delete."""

    def test_list_movies_empty(self, client):
        r = client.get("/api/movies")
        assert r.status_code == 200
        assert r.json() == []

    def test_create_movie(self, client):
        data = create(client)
        assert data["id"]
        assert data["movie_name"] == "Alpha"
        assert data["description"] == "First film"
        assert data["casting"] == "Actor A"

    def test_create_movie_accepts_snake_case(self, client):
        r = client.post(
            "/api/movies",
            json={"movie_name": "Beta", "description": "Second", "casting": "Actor B"},
        )
        assert r.status_code == 200
        assert r.json()["movie_name"] == "Beta"

    @pytest.mark.parametrize("field", ["Movie_Name", "Description", "Casting"])
    def test_create_movie_missing_field(self, client, field):
        body = {k: v for k, v in MOVIE.items() if k != field}
        r = client.post("/api/movies", json=body)
        assert r.status_code == 400
        assert field in r.json()["detail"]

    def test_create_movie_empty_field(self, client):
        r = client.post("/api/movies", json={**MOVIE, "Casting": ""})
        assert r.status_code == 400

    def test_create_movie_numeric_name(self, client):
        """A numeric title such as 1917 is stored as text."""
        r = client.post("/api/movies", json={**MOVIE, "Movie_Name": 1917})
        assert r.status_code == 200
        assert r.json()["movie_name"] == "1917"

    def test_create_movie_malformed_body(self, client):
        r = client.post("/api/movies", json={**MOVIE, "Casting": {"lead": "Someone"}})
        assert r.status_code == 400

    def test_create_movie_non_object_body(self, client):
        r = client.post("/api/movies", json=["Alpha", "First film", "Actor A"])
        assert r.status_code == 400

    def test_created_ids_are_unique(self, client):
        ids = {create(client, Movie_Name=f"Movie {i}")["id"] for i in range(10)}
        assert len(ids) == 10

    def test_get_movie_round_trip(self, client):
        created = create(client)
        r = client.get(f"/api/movies/{created['id']}")
        assert r.status_code == 200
        assert r.json() == created

    def test_get_movie_not_found(self, client):
        r = client.get("/api/movies/does-not-exist")
        assert r.status_code == 404
        assert "not found" in r.json()["detail"].lower()

    def test_list_movies(self, client):
        create(client, Movie_Name="Alpha")
        create(client, Movie_Name="Beta")
        r = client.get("/api/movies")
        assert [m["movie_name"] for m in r.json()] == ["Alpha", "Beta"]

    @pytest.mark.parametrize("method", ["patch", "put"])
    def test_update_movie(self, client, method):
        created = create(client)
        body = {"Movie_Name": "Alpha 2", "Description": "Remake", "Casting": "Actor Z"}

        r = getattr(client, method)(f"/api/movies/{created['id']}", json=body)

        assert r.status_code == 200
        assert r.json() == {
            "id": created["id"],
            "movie_name": "Alpha 2",
            "description": "Remake",
            "casting": "Actor Z",
        }
        assert client.get(f"/api/movies/{created['id']}").json()["movie_name"] == "Alpha 2"

    @pytest.mark.parametrize("method", ["patch", "put"])
    def test_update_movie_not_found(self, client, method):
        r = getattr(client, method)("/api/movies/missing", json=MOVIE)
        assert r.status_code == 404

    @pytest.mark.parametrize("method", ["patch", "put"])
    def test_update_movie_partial_body_rejected(self, client, method):
        created = create(client)
        r = getattr(client, method)(
            f"/api/movies/{created['id']}", json={"Movie_Name": "Only a name"}
        )
        assert r.status_code == 400
        assert client.get(f"/api/movies/{created['id']}").json()["movie_name"] == "Alpha"

    def test_delete_movie_returns_refreshed_list(self, client):
        keep = create(client, Movie_Name="Keep")
        drop = create(client, Movie_Name="Drop")

        r = client.delete(f"/api/movies/{drop['id']}")

        assert r.status_code == 200
        assert r.json() == [keep]
        assert client.get(f"/api/movies/{drop['id']}").status_code == 404

    def test_delete_movie_not_found(self, client):
        r = client.delete("/api/movies/missing")
        assert r.status_code == 404


class TestDeleteMultiple:
    """Tests for POST /api/movies/delete-multiple."""

    def test_deletes_existing_subset(self, client):
        first = create(client, Movie_Name="First")
        second = create(client, Movie_Name="Second")

        r = client.post(
            "/api/movies/delete-multiple",
            json={"ids": [first["id"], "unknown"]},
        )

        assert r.status_code == 200
        assert r.json() == [first]
        assert client.get("/api/movies").json() == [second]

    def test_empty_ids(self, client):
        r = client.post("/api/movies/delete-multiple", json={"ids": []})
        assert r.status_code == 400

    def test_missing_ids(self, client):
        r = client.post("/api/movies/delete-multiple", json={})
        assert r.status_code == 400

    def test_ids_not_a_list(self, client):
        create(client)
        r = client.post("/api/movies/delete-multiple", json={"ids": "abc"})
        assert r.status_code == 400
        assert len(client.get("/api/movies").json()) == 1

    def test_numeric_ids_match_nothing(self, client):
        create(client)
        r = client.post("/api/movies/delete-multiple", json={"ids": [1, 2]})
        assert r.status_code == 404

    def test_none_found(self, client):
        create(client)
        r = client.post("/api/movies/delete-multiple", json={"ids": ["unknown"]})
        assert r.status_code == 404
        assert len(client.get("/api/movies").json()) == 1


class TestUpload:
    """Tests for POST /api/movies/upload."""

    def test_upload_imports_rows(self, client, upload_dir):
        content = xlsx([
            ["Alpha", "First film", "Actor A"],
            ["Beta", "Second film", "Actor B"],
        ])

        r = client.post(
            "/api/movies/upload",
            files={"file": ("movies.xlsx", content, XLSX_TYPE)},
        )

        assert r.status_code == 200
        assert r.json()["imported"] == 2
        assert [m["movie_name"] for m in client.get("/api/movies").json()] == ["Alpha", "Beta"]
        assert os.listdir(upload_dir) == []

    def test_upload_without_file(self, client):
        r = client.post("/api/movies/upload")
        assert r.status_code == 400
        assert "no file" in r.json()["detail"].lower()

    def test_upload_row_missing_field(self, client, upload_dir):
        content = xlsx([
            ["Alpha", "First film", "Actor A"],
            ["Beta", "Second film", "Actor B"],
            ["Gamma", "Third film", "Actor C"],
            ["Delta", "Fourth film", None],
        ])

        r = client.post(
            "/api/movies/upload",
            files={"file": ("movies.xlsx", content, XLSX_TYPE)},
        )

        assert r.status_code == 400
        assert "Casting" in r.json()["detail"]
        assert client.get("/api/movies").json() == []
        assert os.listdir(upload_dir) == []

    def test_upload_row_by_row_policy(self, client, monkeypatch):
        monkeypatch.setenv("IMPORT_ATOMIC", "false")
        content = xlsx([
            ["Alpha", "First film", "Actor A"],
            ["Delta", "Fourth film", None],
        ])

        r = client.post(
            "/api/movies/upload",
            files={"file": ("movies.xlsx", content, XLSX_TYPE)},
        )

        assert r.status_code == 400
        assert [m["movie_name"] for m in client.get("/api/movies").json()] == ["Alpha"]

    def test_upload_unreadable_file(self, client, upload_dir):
        r = client.post(
            "/api/movies/upload",
            files={"file": ("movies.xlsx", b"not a workbook", XLSX_TYPE)},
        )
        assert r.status_code == 400
        assert os.listdir(upload_dir) == []


class TestStoreFailure:
    """Database errors surface as 500 with the driver message."""

    def test_missing_table_returns_500(self):
        db_manager = DatabaseManager(db_path=":memory:")
        app.dependency_overrides[get_db] = override_db(db_manager)
        try:
            r = TestClient(app).get("/api/movies")
        finally:
            app.dependency_overrides.clear()
            db_manager.close()

        assert r.status_code == 500
        assert "no such table" in r.json()["detail"]


class TestSystemEndpoints:
    """Tests for root and health endpoints."""

    def test_root(self, client):
        r = client.get("/")
        assert r.status_code == 200
        assert r.json()["movies"] == "/api/movies"

    def test_health(self, client):
        create(client)
        r = client.get("/api/health")
        assert r.status_code == 200
        assert r.json() == {"status": "healthy", "database": "connected", "movies": 1}
