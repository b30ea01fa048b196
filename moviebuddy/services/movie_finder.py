"""
Service de recherche dans le catalogue de films.

Filtre lineairement la liste fournie par le lecteur de metadonnees.
"""

from loguru import logger

from moviebuddy.core.entities.movie import Movie
from moviebuddy.core.ports.catalog import IMovieCatalog, IMovieReader


class MovieFinder(IMovieCatalog):
    """
    Catalogue de films en lecture seule.

    La liste est relue aupres du lecteur a chaque recherche ; le cache,
    s'il existe, est la responsabilite du lecteur (voir CachingMovieReader).

    Correspondance par realisateur : nom complet, insensible a la casse.
    Correspondance par annee : egalite stricte.
    """

    def __init__(self, reader: IMovieReader) -> None:
        self._reader = reader

    def directed_by(self, director: str) -> list[Movie]:
        wanted = director.strip().casefold()
        movies = [
            movie for movie in self._reader.load_movies()
            if movie.director.casefold() == wanted
        ]
        logger.debug("Recherche par realisateur", director=director, count=len(movies))
        return movies

    def released_year_by(self, release_year: int) -> list[Movie]:
        movies = [
            movie for movie in self._reader.load_movies()
            if movie.release_year == release_year
        ]
        logger.debug("Recherche par annee", release_year=release_year, count=len(movies))
        return movies
