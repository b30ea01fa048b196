"""
Persistance SQLModel des metadonnees de films.

- MovieModel : table movies
- create_db_engine / init_db : engine et creation des tables
- SQLModelMovieRepository : lecteur de films et enregistrement en lot
"""

from moviebuddy.infrastructure.persistence.database import create_db_engine, init_db
from moviebuddy.infrastructure.persistence.models import MovieModel
from moviebuddy.infrastructure.persistence.repositories import SQLModelMovieRepository

__all__ = [
    "MovieModel",
    "create_db_engine",
    "init_db",
    "SQLModelMovieRepository",
]
