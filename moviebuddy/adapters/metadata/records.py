"""
Conversion des enregistrements bruts de metadonnees en entites Movie.

Partage par les lecteurs CSV et XML : les deux formats exposent les memes
champs (title, releaseYear, director, watchedDate) sous forme de texte.
"""

from datetime import datetime
from typing import Mapping, Optional

from moviebuddy.core.entities.movie import WATCHED_DATE_FORMAT, Movie

# Champs obligatoires d'un enregistrement de film
REQUIRED_FIELDS = ("title", "releaseYear", "director", "watchedDate")


def record_to_movie(record: Mapping[str, Optional[str]]) -> Movie:
    """
    Convertit un enregistrement texte en entite Movie.

    Args:
        record: Champs du film indexes par nom de colonne/element

    Returns:
        L'entite Movie correspondante

    Raises:
        ValueError: Si un champ est manquant ou mal forme
    """
    values = {}
    for field in REQUIRED_FIELDS:
        value = record.get(field)
        if value is None or not value.strip():
            raise ValueError(f"missing field '{field}'")
        values[field] = value.strip()

    return Movie(
        title=values["title"],
        release_year=int(values["releaseYear"]),
        director=values["director"],
        watched_date=datetime.strptime(values["watchedDate"], WATCHED_DATE_FORMAT).date(),
    )
