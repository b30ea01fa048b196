"""
Lecteur de metadonnees de films au format CSV.

Format du fichier (en-tete obligatoire, colonnes supplementaires ignorees):
id,title,genres,language,country,releaseYear,director,actors,url,watchedDate
1,Avatar,Action|Adventure,en,US,2009,James Cameron,...,https://...,2021-01-01
"""

import csv
from pathlib import Path

from loguru import logger

from moviebuddy.adapters.metadata.records import record_to_movie
from moviebuddy.core.entities.movie import Movie
from moviebuddy.core.exceptions import MetadataLoadError
from moviebuddy.core.ports.catalog import IMovieReader


class CsvMovieReader(IMovieReader):
    """
    Charge les films depuis un fichier CSV avec en-tete.

    Les lignes vides sont ignorees ; toute ligne mal formee interrompt le
    chargement avec MetadataLoadError (numero de ligne dans le message).
    """

    def __init__(self, location: Path | str) -> None:
        """
        Initialise le lecteur.

        Args:
            location: Chemin vers le fichier CSV
        """
        self._location = Path(location)

    @property
    def location(self) -> Path:
        return self._location

    def load_movies(self) -> list[Movie]:
        if not self._location.is_file():
            raise MetadataLoadError("Metadata file not found", str(self._location))

        movies: list[Movie] = []
        try:
            with open(self._location, encoding="utf-8", newline="") as f:
                reader = csv.DictReader(f)
                for record in reader:
                    if not any(isinstance(value, str) and value.strip() for value in record.values()):
                        continue
                    try:
                        movies.append(record_to_movie(record))
                    except ValueError as error:
                        raise MetadataLoadError(
                            f"Invalid movie record at line {reader.line_num}: {error}",
                            str(self._location),
                        ) from error
        except (OSError, csv.Error) as error:
            raise MetadataLoadError(f"Cannot read metadata: {error}", str(self._location)) from error

        logger.debug("Metadonnees CSV chargees", location=str(self._location), count=len(movies))
        return movies
