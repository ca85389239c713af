"""
Tests for field-level validation rules.
"""

import pytest

from movie_catalog.errors import ValidationFailure
from movie_catalog.requests import UNSET, MovieUpdateRequest
from movie_catalog.validation import (
    check_reference_id,
    normalize_email,
    validate_id,
    validate_movie_changes,
    validate_movie_create,
    validate_name,
    validate_review_rating,
    validate_username,
)


class TestMovieCreateRules:
    """Rules applied to a new movie."""

    def test_valid_movie_passes(self, movie_request):
        validate_movie_create(movie_request())

    @pytest.mark.parametrize("title", ["", "   "])
    def test_title_required(self, movie_request, title):
        with pytest.raises(ValidationFailure, match="movie title is required"):
            validate_movie_create(movie_request(title=title))

    @pytest.mark.parametrize("year", [1800, 1887, 2031])
    def test_release_year_out_of_range(self, movie_request, year):
        with pytest.raises(ValidationFailure, match="invalid release year"):
            validate_movie_create(movie_request(release_year=year))

    @pytest.mark.parametrize("year", [1888, 2010, 2030])
    def test_release_year_bounds_inclusive(self, movie_request, year):
        validate_movie_create(movie_request(release_year=year))

    @pytest.mark.parametrize("duration", [0, -5])
    def test_duration_must_be_positive(self, movie_request, duration):
        with pytest.raises(ValidationFailure, match="duration must be positive"):
            validate_movie_create(movie_request(duration=duration))

    def test_duration_too_large(self, movie_request):
        with pytest.raises(ValidationFailure, match="duration is too large"):
            validate_movie_create(movie_request(duration=2**63))

    def test_director_id_out_of_range(self, movie_request):
        with pytest.raises(ValidationFailure, match="invalid director ID"):
            validate_movie_create(movie_request(director_id=2**64))

    @pytest.mark.parametrize("rating", [-0.1, 10.5])
    def test_rating_out_of_range(self, movie_request, rating):
        with pytest.raises(ValidationFailure, match="rating must be between 0 and 10"):
            validate_movie_create(movie_request(rating=rating))

    @pytest.mark.parametrize("rating", [0.0, 10.0])
    def test_rating_bounds_inclusive(self, movie_request, rating):
        validate_movie_create(movie_request(rating=rating))


class TestMovieChangeRules:
    """Rules applied to a sparse change-set."""

    def test_empty_change_set_passes(self):
        validate_movie_changes({})

    def test_absent_fields_are_not_checked(self):
        validate_movie_changes({"description": "new text"})

    @pytest.mark.parametrize("title", ["", "  ", None])
    def test_title_cannot_be_empty(self, title):
        with pytest.raises(ValidationFailure, match="movie title cannot be empty"):
            validate_movie_changes({"title": title})

    def test_release_year_checked_when_present(self):
        with pytest.raises(ValidationFailure, match="invalid release year"):
            validate_movie_changes({"release_year": 1800})

    def test_null_required_column_rejected(self):
        with pytest.raises(ValidationFailure, match="duration cannot be null"):
            validate_movie_changes({"duration": None})

    def test_clearing_optional_references_allowed(self):
        validate_movie_changes({"genre_id": None, "director_id": None})

    def test_genre_id_out_of_range(self):
        with pytest.raises(ValidationFailure, match="invalid genre ID"):
            validate_movie_changes({"genre_id": 2**70})


class TestUpdateRequest:
    """The UNSET marker keeps "absent" apart from "None"."""

    def test_default_request_has_no_changes(self):
        request = MovieUpdateRequest()
        assert request.changes() == {}
        assert not request.replaces_actors

    def test_explicit_none_enters_change_set(self):
        request = MovieUpdateRequest(genre_id=None, title="New")
        assert request.changes() == {"genre_id": None, "title": "New"}

    def test_actor_ids_kept_out_of_column_changes(self):
        request = MovieUpdateRequest(actor_ids=[])
        assert request.changes() == {}
        assert request.replaces_actors

    def test_unset_is_falsy(self):
        assert not UNSET
        assert repr(UNSET) == "UNSET"


class TestOtherRules:
    """Ids, names, users and reviews."""

    @pytest.mark.parametrize("value", [0, -1, None, 2**63, 2**70])
    def test_invalid_id(self, value):
        with pytest.raises(ValidationFailure, match="invalid movie ID"):
            validate_id("Movie", value)

    def test_valid_id_returned(self):
        assert validate_id("Genre", 3) == 3

    def test_largest_id_accepted(self):
        assert validate_id("Movie", 2**63 - 1) == 2**63 - 1

    @pytest.mark.parametrize("value", [2**63, -(2**63) - 1])
    def test_reference_id_out_of_range(self, value):
        with pytest.raises(ValidationFailure, match="invalid genre ID"):
            check_reference_id("Genre", value)

    @pytest.mark.parametrize("value", [None, 0, -4, 2**63 - 1])
    def test_reference_id_in_range(self, value):
        check_reference_id("Genre", value)

    @pytest.mark.parametrize("rating", [0.5, 10.1])
    def test_review_rating_out_of_range(self, rating):
        with pytest.raises(ValidationFailure, match="review rating must be between 1 and 10"):
            validate_review_rating(rating)

    def test_review_rating_bounds_inclusive(self):
        validate_review_rating(1)
        validate_review_rating(10)

    def test_name_required(self):
        with pytest.raises(ValidationFailure, match="director name is required"):
            validate_name("Director", " ")

    def test_username_required(self):
        with pytest.raises(ValidationFailure, match="username is required"):
            validate_username("")

    def test_email_required(self):
        with pytest.raises(ValidationFailure, match="email is required"):
            normalize_email("")

    @pytest.mark.parametrize("email", ["not-an-email", "a@", "@example.com"])
    def test_email_syntax(self, email):
        with pytest.raises(ValidationFailure, match="invalid email address"):
            normalize_email(email)

    def test_email_normalized(self):
        assert normalize_email(" someone@EXAMPLE.com ") == "someone@example.com"
