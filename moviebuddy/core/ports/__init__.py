"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Ports films :
- IMovieReader : Chargement des metadonnees de films (CSV, XML, base)
- IMovieCatalog : Recherche par realisateur ou annee de sortie

Port localisation :
- ILocalizer : Resolution des messages localises
"""

from moviebuddy.core.ports.catalog import IMovieCatalog, IMovieReader
from moviebuddy.core.ports.localizer import ILocalizer

__all__ = [
    # Films
    "IMovieReader",
    "IMovieCatalog",
    # Localisation
    "ILocalizer",
]
