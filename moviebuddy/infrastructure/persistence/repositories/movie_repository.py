"""
Implementation SQLModel du lecteur de films.

Implemente IMovieReader pour charger les films depuis une base de donnees,
et fournit l'enregistrement en lot utilise par la commande import-movies.
"""

from loguru import logger
from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from moviebuddy.core.entities.movie import Movie
from moviebuddy.core.exceptions import MetadataLoadError
from moviebuddy.core.ports.catalog import IMovieReader
from moviebuddy.infrastructure.persistence.models import MovieModel


class SQLModelMovieRepository(IMovieReader):
    """
    Repository SQLModel pour les films.

    Chaque operation ouvre sa propre session : lecture seule pour
    load_movies(), une transaction validee par save_all().
    """

    def __init__(self, engine: Engine) -> None:
        """
        Initialise le repository avec un engine SQLAlchemy.

        Args :
            engine : Engine connecte a la base contenant la table movies
        """
        self._engine = engine

    def _to_entity(self, model: MovieModel) -> Movie:
        return Movie(
            title=model.title,
            release_year=model.release_year,
            director=model.director,
            watched_date=model.watched_date,
        )

    def _to_model(self, entity: Movie) -> MovieModel:
        return MovieModel(
            title=entity.title,
            release_year=entity.release_year,
            director=entity.director,
            watched_date=entity.watched_date,
        )

    def load_movies(self) -> list[Movie]:
        try:
            with Session(self._engine) as session:
                models = session.exec(select(MovieModel).order_by(MovieModel.id)).all()
                movies = [self._to_entity(model) for model in models]
        except SQLAlchemyError as error:
            raise MetadataLoadError(
                f"Cannot read metadata: {error}", str(self._engine.url)
            ) from error

        logger.debug("Metadonnees chargees depuis la base", count=len(movies))
        return movies

    def save_all(self, movies: list[Movie]) -> int:
        """
        Enregistre les films dans une seule transaction.

        Returns:
            Nombre de films enregistres
        """
        with Session(self._engine) as session:
            session.add_all([self._to_model(movie) for movie in movies])
            session.commit()

        logger.info("Films enregistres en base", count=len(movies))
        return len(movies)
