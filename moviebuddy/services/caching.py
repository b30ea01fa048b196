"""
Cache des metadonnees de films avec expiration apres ecriture.

Le cache utilise diskcache : la liste chargee est conservee pendant
ttl secondes, puis relue aupres du lecteur enveloppe au prochain appel.

TTL par defaut (DEFAULT_TTL): 3 secondes, pour que les modifications du
fichier de metadonnees soient visibles rapidement dans le shell.
"""

from typing import Optional

from diskcache import Cache
from loguru import logger

from moviebuddy.core.entities.movie import Movie
from moviebuddy.core.ports.catalog import IMovieReader


class CachingMovieReader(IMovieReader):
    """
    Lecteur de films qui memorise le resultat d'un autre lecteur.

    Attributes:
        DEFAULT_TTL: Duree de vie par defaut des entrees (3 secondes)

    Example:
        cache = Cache(".cache/moviebuddy")
        reader = CachingMovieReader(CsvMovieReader("movies.csv"), cache, key="csv:movies.csv")
        movies = reader.load_movies()
    """

    DEFAULT_TTL = 3

    def __init__(
        self,
        reader: IMovieReader,
        cache: Cache,
        key: str = "movies",
        ttl: Optional[int] = DEFAULT_TTL,
    ) -> None:
        """
        Args:
            reader: Lecteur enveloppe (CSV, XML, base)
            cache: Instance diskcache partagee
            key: Cle de l'entree (doit identifier la source)
            ttl: Duree de vie en secondes (None = pas d'expiration)
        """
        self._reader = reader
        self._cache = cache
        self._key = key
        self._ttl = ttl

    def load_movies(self) -> list[Movie]:
        movies = self._cache.get(self._key)
        if movies is not None:
            logger.debug("Cache hit", key=self._key)
            return list(movies)

        logger.debug("Cache miss", key=self._key)
        movies = self._reader.load_movies()
        self._cache.set(self._key, movies, expire=self._ttl)
        return list(movies)

    def evict(self) -> None:
        """Supprime l'entree du cache."""
        self._cache.delete(self._key)
