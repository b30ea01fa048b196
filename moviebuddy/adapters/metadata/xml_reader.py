"""
Lecteur de metadonnees de films au format XML.

Format du document:
<moviemetadata>
  <movie>
    <title>Avatar</title>
    <releaseYear>2009</releaseYear>
    <director>James Cameron</director>
    <watchedDate>2021-01-01</watchedDate>
  </movie>
</moviemetadata>
"""

import xml.etree.ElementTree as ET
from pathlib import Path

from loguru import logger

from moviebuddy.adapters.metadata.records import REQUIRED_FIELDS, record_to_movie
from moviebuddy.core.entities.movie import Movie
from moviebuddy.core.exceptions import MetadataLoadError
from moviebuddy.core.ports.catalog import IMovieReader

ROOT_TAG = "moviemetadata"
MOVIE_TAG = "movie"


class XmlMovieReader(IMovieReader):
    """Charge les films depuis un document XML <moviemetadata>."""

    def __init__(self, location: Path | str) -> None:
        self._location = Path(location)

    @property
    def location(self) -> Path:
        return self._location

    def load_movies(self) -> list[Movie]:
        if not self._location.is_file():
            raise MetadataLoadError("Metadata file not found", str(self._location))

        try:
            root = ET.parse(self._location).getroot()
        except (OSError, ET.ParseError) as error:
            raise MetadataLoadError(f"Cannot read metadata: {error}", str(self._location)) from error

        if root.tag != ROOT_TAG:
            raise MetadataLoadError(
                f"Unexpected root element <{root.tag}>, expected <{ROOT_TAG}>",
                str(self._location),
            )

        movies: list[Movie] = []
        for index, element in enumerate(root.iter(MOVIE_TAG), start=1):
            record = {field: element.findtext(field) for field in REQUIRED_FIELDS}
            try:
                movies.append(record_to_movie(record))
            except ValueError as error:
                raise MetadataLoadError(
                    f"Invalid movie record #{index}: {error}", str(self._location)
                ) from error

        logger.debug("Metadonnees XML chargees", location=str(self._location), count=len(movies))
        return movies
