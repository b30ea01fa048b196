"""
Lecteurs de metadonnees de films bases sur des fichiers.

- CsvMovieReader : fichier CSV avec en-tete
- XmlMovieReader : document XML <moviemetadata>
"""

from moviebuddy.adapters.metadata.csv_reader import CsvMovieReader
from moviebuddy.adapters.metadata.xml_reader import XmlMovieReader

__all__ = [
    "CsvMovieReader",
    "XmlMovieReader",
]
