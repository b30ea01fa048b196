"""
Container d'injection de dependances via dependency-injector.

Selectionne le lecteur de metadonnees d'apres la configuration, l'enveloppe
dans le cache diskcache et fournit le catalogue et le localiseur au shell.
"""

from collections.abc import Iterator
from pathlib import Path

from dependency_injector import containers, providers
from diskcache import Cache

from .adapters.i18n import MessageSourceLocalizer
from .adapters.metadata import CsvMovieReader, XmlMovieReader
from .config import Settings
from .infrastructure.persistence import SQLModelMovieRepository, create_db_engine
from .services import CachingMovieReader, MovieFinder


def open_cache(directory: Path) -> Iterator[Cache]:
    """Ressource diskcache : ouverte a l'initialisation, fermee a l'arret."""
    cache = Cache(str(directory))
    try:
        yield cache
    finally:
        cache.close()


def _metadata_kind(settings: Settings) -> str:
    return settings.metadata_kind


def _cache_key(settings: Settings) -> str:
    return f"movies:{settings.metadata_kind}:{settings.metadata_location}"


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.init_resources()  # Ouvre le cache
        catalog = container.movie_finder()
        localizer = container.localizer()
        ...
        container.shutdown_resources()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Cache disque - Resource pour ouverture/fermeture uniques
    cache = providers.Resource(open_cache, directory=config.provided.cache_dir)

    # Engine SQL - uniquement instancie pour une source de type "database"
    database_engine = providers.Singleton(
        create_db_engine, database_url=config.provided.metadata_location
    )

    # Lecteur brut, choisi selon le type de source
    movie_reader = providers.Selector(
        providers.Callable(_metadata_kind, config),
        csv=providers.Factory(CsvMovieReader, location=config.provided.metadata_location),
        xml=providers.Factory(XmlMovieReader, location=config.provided.metadata_location),
        database=providers.Factory(SQLModelMovieRepository, engine=database_engine),
    )

    # Lecteur avec cache (expiration apres ecriture)
    cached_movie_reader = providers.Singleton(
        CachingMovieReader,
        reader=movie_reader,
        cache=cache,
        key=providers.Callable(_cache_key, config),
        ttl=config.provided.cache_ttl_seconds,
    )

    # Services exposes au shell
    movie_finder = providers.Singleton(MovieFinder, reader=cached_movie_reader)
    localizer = providers.Singleton(MessageSourceLocalizer, locale=config.provided.locale)
