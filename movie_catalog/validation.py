"""
Field-level business rules applied before create and update.

Each check raises ValidationFailure with a message suitable for
returning to the caller as-is.
"""

from typing import Any, Dict, Optional

from email_validator import EmailNotValidError, validate_email

from .errors import ValidationFailure
from .requests import MovieCreateRequest

MIN_RELEASE_YEAR = 1888
MAX_RELEASE_YEAR = 2030
MIN_MOVIE_RATING = 0.0
MAX_MOVIE_RATING = 10.0
MIN_REVIEW_RATING = 1.0
MAX_REVIEW_RATING = 10.0

# Signed 64-bit range of the id and integer columns
MAX_ID = 2**63 - 1

# Non-nullable movie columns besides title, which has its own message
REQUIRED_MOVIE_FIELDS = ("release_year", "duration", "rating")


def validate_id(resource: str, value: Optional[int]) -> int:
    """Reject missing, non-positive or out-of-range identifiers."""
    if value is None or value < 1 or value > MAX_ID:
        raise ValidationFailure(f"invalid {resource.lower()} ID", details={"id": value})
    return value


def check_reference_id(resource: str, value: Optional[int]) -> None:
    """Reject a filter or foreign-key id the datastore cannot represent."""
    if value is not None and not -MAX_ID - 1 <= value <= MAX_ID:
        raise ValidationFailure(f"invalid {resource.lower()} ID", details={"id": value})


def check_release_year(year: int) -> None:
    if year < MIN_RELEASE_YEAR or year > MAX_RELEASE_YEAR:
        raise ValidationFailure(
            "invalid release year",
            details={"release_year": year, "min": MIN_RELEASE_YEAR, "max": MAX_RELEASE_YEAR},
        )


def check_duration(duration: int) -> None:
    if duration <= 0:
        raise ValidationFailure("duration must be positive", details={"duration": duration})
    if duration > MAX_ID:
        raise ValidationFailure("duration is too large", details={"duration": duration})


def check_movie_rating(rating: float) -> None:
    if rating < MIN_MOVIE_RATING or rating > MAX_MOVIE_RATING:
        raise ValidationFailure("rating must be between 0 and 10", details={"rating": rating})


def validate_movie_create(request: MovieCreateRequest) -> None:
    """Validate every field of a new movie."""
    if not request.title or not request.title.strip():
        raise ValidationFailure("movie title is required")
    check_release_year(request.release_year)
    check_duration(request.duration)
    check_movie_rating(request.rating)
    check_reference_id("Genre", request.genre_id)
    check_reference_id("Director", request.director_id)


def validate_movie_changes(changes: Dict[str, Any]) -> None:
    """
    Validate a sparse movie change-set.

    A rule only runs when its field is present in the change-set.
    """
    for name in REQUIRED_MOVIE_FIELDS:
        if name in changes and changes[name] is None:
            raise ValidationFailure(f"{name} cannot be null", details={"field": name})

    if "title" in changes:
        title = changes["title"]
        if title is None or not title.strip():
            raise ValidationFailure("movie title cannot be empty")
    if "release_year" in changes:
        check_release_year(changes["release_year"])
    if "duration" in changes:
        check_duration(changes["duration"])
    if "rating" in changes:
        check_movie_rating(changes["rating"])
    check_reference_id("Genre", changes.get("genre_id"))
    check_reference_id("Director", changes.get("director_id"))


def validate_review_rating(rating: float) -> None:
    if rating < MIN_REVIEW_RATING or rating > MAX_REVIEW_RATING:
        raise ValidationFailure(
            "review rating must be between 1 and 10", details={"rating": rating}
        )


def validate_name(resource: str, name: Optional[str]) -> None:
    if not name or not name.strip():
        raise ValidationFailure(f"{resource.lower()} name is required")


def validate_username(username: Optional[str]) -> None:
    if not username or not username.strip():
        raise ValidationFailure("username is required")


def normalize_email(email: Optional[str]) -> str:
    """
    Check email syntax and return its normalized form.

    Deliverability (DNS) is not checked.
    """
    if not email or not email.strip():
        raise ValidationFailure("email is required")
    try:
        result = validate_email(email.strip(), check_deliverability=False)
    except EmailNotValidError as e:
        raise ValidationFailure(f"invalid email address: {e}", details={"email": email}) from e
    return result.normalized
