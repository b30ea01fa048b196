"""
Actions liees aux commandes du shell.

Chaque action recoit la liste complete des jetons de la ligne et retourne un
ActionResult : l'issue de l'iteration (continuer ou terminer) et, en cas
d'echec, l'erreur applicative a signaler. Les actions ecrivent leurs
resultats sur le flux de sortie via le localiseur.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TextIO

from loguru import logger

from moviebuddy.adapters.cli.parser import Command
from moviebuddy.core.entities.movie import Movie
from moviebuddy.core.exceptions import ApplicationError, InvalidCommandArgumentsError
from moviebuddy.core.ports.catalog import IMovieCatalog
from moviebuddy.core.ports.localizer import ILocalizer


class Outcome(Enum):
    """Issue d'une iteration de la boucle de commandes."""

    CONTINUE = "continue"
    TERMINATE = "terminate"


@dataclass(frozen=True)
class ActionResult:
    """
    Resultat d'une action.

    Attributes:
        outcome: CONTINUE ou TERMINATE
        error: Erreur applicative a signaler, ou None en cas de succes
    """

    outcome: Outcome = Outcome.CONTINUE
    error: Optional[ApplicationError] = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    @classmethod
    def ok(cls, outcome: Outcome = Outcome.CONTINUE) -> "ActionResult":
        return cls(outcome=outcome)

    @classmethod
    def failure(cls, error: ApplicationError) -> "ActionResult":
        """Echec recuperable : la boucle signale l'erreur et continue."""
        return cls(outcome=Outcome.CONTINUE, error=error)


CommandAction = Callable[[list[str]], ActionResult]


class CommandActions:
    """
    Implementations des commandes quit, directedBy et releasedYearBy.

    Usage:
        actions = CommandActions(catalog, localizer, sys.stdout)
        table = actions.table()
        result = table[Command.QUIT](["quit"])
    """

    def __init__(self, catalog: IMovieCatalog, localizer: ILocalizer, output: TextIO) -> None:
        self._catalog = catalog
        self._localizer = localizer
        self._output = output

    def table(self) -> dict[Command, CommandAction]:
        """Table commande -> action, une entree par commande."""
        return {
            Command.QUIT: self.quit,
            Command.DIRECTED_BY: self.directed_by,
            Command.RELEASED_YEAR_BY: self.released_year_by,
        }

    def _println(self, text: str = "") -> None:
        print(text, file=self._output)

    def quit(self, arguments: list[str]) -> ActionResult:
        """Affiche le message d'adieu et termine la boucle."""
        self._println(self._localizer.message("application.commands.quit"))
        return ActionResult.ok(Outcome.TERMINATE)

    def directed_by(self, arguments: list[str]) -> ActionResult:
        """directedBy <realisateur...> : films d'un realisateur."""
        director = " ".join(arguments[1:])
        if not director.strip():
            return ActionResult.failure(InvalidCommandArgumentsError("director name is required"))

        movies = self._catalog.directed_by(director)
        self._print_movies("application.commands.directedBy", director, movies)
        return ActionResult.ok()

    def released_year_by(self, arguments: list[str]) -> ActionResult:
        """releasedYearBy <annee> : films sortis une annee donnee."""
        try:
            release_year = int(arguments[1])
        except (IndexError, ValueError) as error:
            logger.debug("Annee de sortie invalide", arguments=arguments)
            return ActionResult.failure(InvalidCommandArgumentsError(str(error)))

        movies = self._catalog.released_year_by(release_year)
        self._print_movies("application.commands.releasedYearBy", str(release_year), movies)
        return ActionResult.ok()

    def _print_movies(self, key: str, criteria: str, movies: list[Movie]) -> None:
        """Affiche l'en-tete, une ligne numerotee par film, puis le total."""
        self._println(self._localizer.message(key, [criteria]))
        for index, movie in enumerate(movies, start=1):
            self._println(
                self._localizer.message(
                    f"{key}.format",
                    [
                        str(index),
                        movie.title,
                        str(movie.release_year),
                        movie.director,
                        movie.formatted_watched_date,
                    ],
                )
            )
        self._println(self._localizer.message(f"{key}.count", [str(len(movies))]))
