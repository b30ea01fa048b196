"""
Modeles SQLModel pour la base de donnees MovieBuddy.

Ces modeles representent les tables de la base de donnees.
Ils sont distincts des entites de domaine (dataclass dans core/entities/).

Tables:
- movies: Films vus avec realisateur et date de visionnage
"""

from __future__ import annotations

from datetime import date

from sqlmodel import Field, SQLModel


class MovieModel(SQLModel, table=True):
    """Modele representant un film dans la base de donnees."""

    __tablename__ = "movies"

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(index=True)
    release_year: int = Field(index=True)
    director: str = Field(index=True)
    watched_date: date
