"""
Catalog API flow tests: genres, directors, actors, users and health.
"""

import pytest


class TestGenreFlow:
    """Genres and their movies"""

    def test_list_genres(self, api_client):
        response = api_client.get("/genres?limit=4")

        assert response.status_code == 200
        data = response.json()
        assert [g["name"] for g in data["data"]] == ["Action", "Comedy", "Drama", "Horror"]
        assert data["pagination"]["total"] == 6
        assert data["pagination"]["has_next"] is True

    def test_create_and_get_genre(self, api_client):
        response = api_client.post("/genres", json={"name": "Western", "description": "Frontier stories"})

        assert response.status_code == 201
        genre = response.json()["data"]
        assert genre["id"] == 7

        fetched = api_client.get("/genres/7").json()["data"]
        assert fetched["description"] == "Frontier stories"

    def test_create_genre_without_name(self, api_client):
        response = api_client.post("/genres", json={"name": ""})

        assert response.status_code == 400
        assert response.json()["message"] == "genre name is required"

    def test_unknown_genre(self, api_client):
        response = api_client.get("/genres/40")

        assert response.status_code == 404
        assert response.json()["message"] == "Genre with ID 40 not found"

    def test_genre_movies(self, api_client):
        data = api_client.get("/genres/2/movies").json()

        assert [m["title"] for m in data["data"]] == ["Barbie"]
        assert data["pagination"]["total"] == 1

    def test_genre_movies_invalid_id(self, api_client):
        response = api_client.get("/genres/0/movies")

        assert response.status_code == 400
        assert response.json()["message"] == "invalid genre ID"


class TestPeopleFlow:
    """Directors and actors"""

    def test_list_directors(self, api_client):
        data = api_client.get("/directors").json()

        assert [d["name"] for d in data["data"]] == [
            "Christopher Nolan",
            "Quentin Tarantino",
            "Greta Gerwig",
        ]

    def test_create_director(self, api_client):
        response = api_client.post(
            "/directors",
            json={"name": "Agnes Varda", "birth_date": "1928-05-30", "nationality": "French"},
        )

        assert response.status_code == 201
        director = response.json()["data"]
        assert director["id"] == 4
        assert director["birth_date"] == "1928-05-30"

    def test_director_movies(self, api_client):
        data = api_client.get("/directors/3/movies").json()
        assert [m["title"] for m in data["data"]] == ["Barbie", "Poor Things"]

    def test_get_actor(self, api_client):
        actor = api_client.get("/actors/2").json()["data"]

        assert actor["name"] == "Margot Robbie"
        assert actor["nationality"] == "Australian"

    def test_create_actor_without_name(self, api_client):
        response = api_client.post("/actors", json={"name": "   "})

        assert response.status_code == 400
        assert response.json()["message"] == "actor name is required"

    def test_actor_movies(self, api_client):
        data = api_client.get("/actors/1/movies").json()

        assert [m["title"] for m in data["data"]] == ["Inception", "Pulp Fiction"]
        assert data["pagination"]["total"] == 2

    def test_new_actor_can_be_cast(self, api_client):
        actor_id = api_client.post("/actors", json={"name": "Ryan Gosling"}).json()["data"]["id"]
        api_client.put("/movies/2", json={"actor_ids": [2, actor_id]})

        data = api_client.get(f"/actors/{actor_id}/movies").json()
        assert [m["title"] for m in data["data"]] == ["Barbie"]

    def test_unknown_director(self, api_client):
        assert api_client.get("/directors/8").status_code == 404


class TestUserFlow:
    """User accounts"""

    def test_create_user(self, api_client):
        response = api_client.post("/users", json={"username": "popcorn", "email": "pop@Corn.com"})

        assert response.status_code == 201
        user = response.json()["data"]
        assert user["id"] == 4
        assert user["email"] == "pop@corn.com"

    @pytest.mark.parametrize(
        "payload, message",
        [
            ({"username": "", "email": "a@example.com"}, "username is required"),
            ({"username": "someone", "email": ""}, "email is required"),
        ],
    )
    def test_create_user_invalid(self, api_client, payload, message):
        response = api_client.post("/users", json=payload)

        assert response.status_code == 400
        assert response.json()["message"] == message

    def test_create_user_bad_email(self, api_client):
        response = api_client.post("/users", json={"username": "someone", "email": "no-at-sign"})

        assert response.status_code == 400
        assert response.json()["message"].startswith("invalid email address")

    def test_get_user(self, api_client):
        user = api_client.get("/users/3").json()["data"]

        assert user["username"] == "film_critic"
        assert user["email"] == "critic@films.com"

    def test_list_users(self, api_client):
        data = api_client.get("/users").json()
        assert [u["username"] for u in data["data"]] == ["movie_lover", "cinema_fan", "film_critic"]

    def test_unknown_user(self, api_client):
        assert api_client.get("/users/12").status_code == 404


class TestHealth:
    """Liveness"""

    def test_health(self, api_client):
        response = api_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"health": "ok", "status": 200}
