"""
Fixtures pytest partagees pour les tests MovieBuddy.

Ce module contient les fixtures communes utilisees dans les tests:
- Films d'exemple et fichiers de metadonnees temporaires
- Mock du catalogue (IMovieCatalog)
- Localiseur reel sur les bundles livres, en anglais
- Settings de test avec chemins temporaires
"""

from datetime import date
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from moviebuddy.adapters.i18n import MessageSourceLocalizer
from moviebuddy.config import Settings
from moviebuddy.core.entities import Movie
from moviebuddy.core.ports import IMovieCatalog

CSV_HEADER = "id,title,genres,language,country,releaseYear,director,actors,url,watchedDate"


@pytest.fixture
def sample_movies() -> list[Movie]:
    """Quatre films dont deux de Michael Bay et deux sortis en 2015."""
    return [
        Movie("Pearl Harbor", 2001, "Michael Bay", date(2021, 1, 20)),
        Movie("Spectre", 2015, "Sam Mendes", date(2021, 1, 9)),
        Movie("Transformers: Age of Extinction", 2014, "Michael Bay", date(2021, 1, 15)),
        Movie("Mad Max: Fury Road", 2015, "George Miller", date(2021, 2, 1)),
    ]


@pytest.fixture
def csv_metadata(tmp_path: Path, sample_movies: list[Movie]) -> Path:
    """Fichier CSV contenant sample_movies."""
    lines = [CSV_HEADER]
    for index, movie in enumerate(sample_movies, start=1):
        lines.append(
            f"{index},{movie.title},Action,en,USA,{movie.release_year},"
            f"{movie.director},Someone,https://example.org/{index},{movie.formatted_watched_date}"
        )
    path = tmp_path / "movies.csv"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def xml_metadata(tmp_path: Path, sample_movies: list[Movie]) -> Path:
    """Document XML contenant sample_movies."""
    entries = "".join(
        "<movie>"
        f"<title>{movie.title}</title>"
        f"<releaseYear>{movie.release_year}</releaseYear>"
        f"<director>{movie.director}</director>"
        f"<watchedDate>{movie.formatted_watched_date}</watchedDate>"
        "</movie>"
        for movie in sample_movies
    )
    path = tmp_path / "movies.xml"
    path.write_text(f"<moviemetadata>{entries}</moviemetadata>", encoding="utf-8")
    return path


@pytest.fixture
def mock_catalog(sample_movies: list[Movie]) -> MagicMock:
    """
    Mock de IMovieCatalog filtrant sample_movies.

    directed_by : egalite exacte ; released_year_by : egalite sur l'annee.
    """
    mock = MagicMock(spec=IMovieCatalog)
    mock.directed_by.side_effect = lambda director: [
        movie for movie in sample_movies if movie.director == director
    ]
    mock.released_year_by.side_effect = lambda year: [
        movie for movie in sample_movies if movie.release_year == year
    ]
    return mock


@pytest.fixture
def localizer() -> MessageSourceLocalizer:
    """Localiseur sur les bundles livres, force en anglais (bundle de base)."""
    return MessageSourceLocalizer(locale="en")


@pytest.fixture
def test_settings(tmp_path: Path, csv_metadata: Path) -> Settings:
    """Settings de test avec chemins temporaires et metadonnees CSV."""
    return Settings(
        metadata_location=str(csv_metadata),
        locale="en",
        cache_dir=tmp_path / "cache",
        cache_ttl_seconds=60,
        log_level="ERROR",
        log_file=tmp_path / "test.log",
    )
