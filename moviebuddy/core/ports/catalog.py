"""
Interfaces ports pour l'acces aux films.

- IMovieReader : chargement de la liste complete des films depuis une source
- IMovieCatalog : recherche de films par realisateur ou annee de sortie
"""

from abc import ABC, abstractmethod

from moviebuddy.core.entities.movie import Movie


class IMovieReader(ABC):
    """
    Interface de chargement des metadonnees de films.

    Les implementations (CSV, XML, base de donnees) levent MetadataLoadError
    si la source est illisible ou mal formee.
    """

    @abstractmethod
    def load_movies(self) -> list[Movie]:
        """Charge tous les films de la source, dans l'ordre de la source."""
        ...


class IMovieCatalog(ABC):
    """
    Interface de recherche dans le catalogue de films.

    L'ordre des resultats est celui de la source ; les appelants ne trient pas.
    """

    @abstractmethod
    def directed_by(self, director: str) -> list[Movie]:
        """Films realises par le realisateur donne."""
        ...

    @abstractmethod
    def released_year_by(self, release_year: int) -> list[Movie]:
        """Films sortis l'annee donnee."""
        ...
