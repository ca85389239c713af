"""
Sample catalog data for a fresh database.
"""

from sqlalchemy.orm import Session

from .models import Actor, Director, Genre, Movie, Review, User

SAMPLE_GENRES = [
    ("Action", "Action and adventure movies"),
    ("Comedy", "Funny and entertaining movies"),
    ("Drama", "Dramatic movies"),
    ("Horror", "Horror and suspense movies"),
    ("Science Fiction", "Science fiction movies"),
    ("Romance", "Romantic movies"),
]

SAMPLE_DIRECTORS = [
    ("Christopher Nolan", "British director known for Inception, Interstellar and The Dark Knight", "British"),
    ("Quentin Tarantino", "American director known for Pulp Fiction and Kill Bill", "American"),
    ("Greta Gerwig", "American director known for Lady Bird and Barbie", "American"),
]

SAMPLE_ACTORS = [
    ("Leonardo DiCaprio", "American actor and Oscar winner", "American"),
    ("Margot Robbie", "Australian actress known for Barbie and Suicide Squad", "Australian"),
    ("Tom Hardy", "British actor known for Mad Max and Venom", "British"),
    ("Emma Stone", "American actress and Oscar winner", "American"),
]

SAMPLE_USERS = [
    ("movie_lover", "lover@movies.com"),
    ("cinema_fan", "fan@cinema.com"),
    ("film_critic", "critic@films.com"),
]


def seed_sample_data(session: Session) -> None:
    """
    Add the sample catalog to the session and flush it.

    The caller owns the transaction.
    """
    genres = [Genre(name=name, description=desc) for name, desc in SAMPLE_GENRES]
    directors = [
        Director(name=name, biography=bio, nationality=nat) for name, bio, nat in SAMPLE_DIRECTORS
    ]
    actors = [Actor(name=name, biography=bio, nationality=nat) for name, bio, nat in SAMPLE_ACTORS]
    users = [User(username=username, email=email) for username, email in SAMPLE_USERS]
    session.add_all(genres + directors + actors + users)

    inception = Movie(
        title="Inception",
        description=(
            "A thief who steals corporate secrets through the use of dream-sharing technology "
            "is given the inverse task of planting an idea into the mind of a C.E.O."
        ),
        release_year=2010,
        duration=148,
        rating=8.8,
        poster_url="https://example.com/inception.jpg",
        trailer_url="https://example.com/inception-trailer.mp4",
        genre=genres[4],
        director=directors[0],
        actors=[actors[0], actors[2]],
    )
    barbie = Movie(
        title="Barbie",
        description="Barbie suffers an existential crisis and travels to the real world to find true happiness.",
        release_year=2023,
        duration=114,
        rating=7.0,
        poster_url="https://example.com/barbie.jpg",
        trailer_url="https://example.com/barbie-trailer.mp4",
        genre=genres[1],
        director=directors[2],
        actors=[actors[1]],
    )
    pulp_fiction = Movie(
        title="Pulp Fiction",
        description=(
            "The lives of two mob hitmen, a boxer, a gangster and his wife, and a pair of diner "
            "bandits intertwine in four tales of violence and redemption."
        ),
        release_year=1994,
        duration=154,
        rating=8.9,
        poster_url="https://example.com/pulp-fiction.jpg",
        trailer_url="https://example.com/pulp-fiction-trailer.mp4",
        genre=genres[0],
        director=directors[1],
        actors=[actors[0]],
    )
    poor_things = Movie(
        title="Poor Things",
        description=(
            "The incredible evolution of Bella Baxter, a young woman brought back to life by the "
            "brilliant and unorthodox scientist Dr. Godwin Baxter."
        ),
        release_year=2023,
        duration=141,
        rating=8.4,
        poster_url="https://example.com/poor-things.jpg",
        trailer_url="https://example.com/poor-things-trailer.mp4",
        genre=genres[2],
        director=directors[2],
        actors=[actors[3]],
    )
    movies = [inception, barbie, pulp_fiction, poor_things]
    session.add_all(movies)

    session.add_all([
        Review(
            movie=inception,
            user=users[0],
            rating=9.0,
            comment="A masterpiece of cinema. Nolan never disappoints.",
        ),
        Review(
            movie=barbie,
            user=users[1],
            rating=7.5,
            comment="Funny and with an important message. Margot Robbie is incredible.",
        ),
        Review(
            movie=pulp_fiction,
            user=users[2],
            rating=9.5,
            comment="Absolute classic. Tarantino at his best.",
        ),
    ])
    session.flush()
