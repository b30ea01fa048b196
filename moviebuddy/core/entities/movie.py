"""
Movie entity.

Immutable record describing a movie from the metadata catalog.
"""

from dataclasses import dataclass
from datetime import date

# Fixed output pattern for watched dates (yyyy-mm-dd)
WATCHED_DATE_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True)
class Movie:
    """
    A movie the user has watched.

    Instances are created by the metadata readers and never mutated.

    Attributes:
        title: Movie title
        release_year: Release year
        director: Director name
        watched_date: Date the movie was watched
    """

    title: str
    release_year: int
    director: str
    watched_date: date

    @property
    def formatted_watched_date(self) -> str:
        """Watched date rendered with WATCHED_DATE_FORMAT."""
        return self.watched_date.strftime(WATCHED_DATE_FORMAT)
