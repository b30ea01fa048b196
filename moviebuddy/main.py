"""
Point d'entree CLI de MovieBuddy.

Sans sous-commande, lance le shell interactif de recherche de films.
Sous-commandes : info, version, import-movies.
"""

import sys
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from . import __version__
from .adapters.cli import dispatcher
from .adapters.metadata import CsvMovieReader, XmlMovieReader
from .config import Settings
from .container import Container
from .infrastructure.persistence import SQLModelMovieRepository, init_db
from .logging_config import configure_logging

app = typer.Typer(
    name="moviebuddy",
    help="Recherche de films par realisateur ou annee de sortie",
    add_completion=False,
)
container = Container()
console = Console()

# Code de sortie POSIX pour Ctrl+C (128 + SIGINT)
KEYBOARD_INTERRUPT_EXIT_CODE = 130


def get_config() -> Settings:
    """Recupere les parametres de l'application depuis le container DI."""
    return container.config()


@app.callback(invoke_without_command=True)
def main_callback(ctx: typer.Context) -> None:
    """MovieBuddy - lance le shell interactif si aucune commande n'est donnee."""
    configure_logging(get_config())
    if ctx.invoked_subcommand is None:
        shell()


def shell() -> None:
    """Execute le shell interactif sur stdin/stdout."""
    settings = get_config()
    logger.info(
        "Demarrage de MovieBuddy",
        version=__version__,
        metadata=settings.metadata_location,
        kind=settings.metadata_kind,
    )
    container.init_resources()
    try:
        dispatcher.run(sys.stdin, sys.stdout, container.movie_finder(), container.localizer())
    except KeyboardInterrupt:
        typer.echo()
        raise typer.Exit(code=KEYBOARD_INTERRUPT_EXIT_CODE)
    finally:
        container.shutdown_resources()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    table = Table(title="Configuration MovieBuddy")
    table.add_column("Parametre", style="cyan")
    table.add_column("Valeur")
    table.add_row("Metadonnees", config.metadata_location)
    table.add_row("Type de source", config.metadata_kind)
    table.add_row("Locale", config.locale or container.localizer().locale or "(defaut)")
    table.add_row("Cache", str(config.cache_dir))
    table.add_row("TTL du cache", f"{config.cache_ttl_seconds} s")
    table.add_row("Niveau de log", config.log_level)
    console.print(table)


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"MovieBuddy v{__version__}")


@app.command(name="import-movies")
def import_movies(
    source: Annotated[Path, typer.Argument(help="Fichier CSV ou XML a importer")],
) -> None:
    """Importe un fichier de metadonnees dans la base configuree."""
    config = get_config()
    if config.metadata_kind != "database":
        typer.echo(
            "MOVIEBUDDY_METADATA_LOCATION doit etre une URL de base de donnees "
            f"(actuellement : {config.metadata_location})",
            err=True,
        )
        raise typer.Exit(code=1)

    reader = XmlMovieReader(source) if source.suffix.lower() == ".xml" else CsvMovieReader(source)
    movies = reader.load_movies()

    engine = container.database_engine()
    init_db(engine)
    count = SQLModelMovieRepository(engine).save_all(movies)
    typer.echo(f"{count} film(s) importe(s) depuis {source}")


def main() -> None:
    """Point d'entree de l'application."""
    app()


if __name__ == "__main__":
    main()
