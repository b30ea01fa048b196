"""Repositories SQLModel."""

from moviebuddy.infrastructure.persistence.repositories.movie_repository import (
    SQLModelMovieRepository,
)

__all__ = ["SQLModelMovieRepository"]
