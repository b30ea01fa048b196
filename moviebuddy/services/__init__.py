"""Services applicatifs : recherche dans le catalogue et cache des metadonnees."""

from moviebuddy.services.caching import CachingMovieReader
from moviebuddy.services.movie_finder import MovieFinder

__all__ = [
    "CachingMovieReader",
    "MovieFinder",
]
