"""
Boucle interactive de commandes (read-eval-print).

Lit une ligne, resout la commande, execute l'action liee et affiche une ligne
d'erreur localisee en cas d'echec applicatif. La boucle s'arrete lorsqu'une
action retourne Outcome.TERMINATE (commande quit ou fin de l'entree).

Les erreurs applicatives (ApplicationError) sont recuperees en un seul point,
dispatch(). Toute autre exception remonte et termine le processus.
"""

from collections.abc import Mapping
from typing import Optional, TextIO

from loguru import logger

from moviebuddy.adapters.cli.actions import (
    ActionResult,
    CommandAction,
    CommandActions,
    Outcome,
)
from moviebuddy.adapters.cli.parser import Command, parse, tokenize
from moviebuddy.core.exceptions import (
    ApplicationError,
    CommandTableError,
    UndefinedCommandActionError,
)
from moviebuddy.core.ports.catalog import IMovieCatalog
from moviebuddy.core.ports.localizer import ILocalizer

PROMPT = "❯ "


class CommandDispatcher:
    """
    Table des actions et boucle de lecture des commandes.

    La table doit lier une action a chaque Command : une table incomplete
    est rejetee a la construction (CommandTableError).
    """

    def __init__(
        self,
        actions: Mapping[Command, CommandAction],
        localizer: ILocalizer,
        output: TextIO,
    ) -> None:
        missing = [command.value for command in Command if command not in actions]
        if missing:
            raise CommandTableError(missing)
        self._actions = dict(actions)
        self._localizer = localizer
        self._output = output

    def dispatch(self, raw_line: Optional[str]) -> ActionResult:
        """
        Execute la commande d'une ligne brute.

        Returns:
            Le resultat de l'action, ou un echec UndefinedCommandAction si la
            ligne ne designe aucune commande liee
        """
        arguments = tokenize(raw_line)
        command = parse(raw_line)
        action = self._actions.get(command) if command is not None else None
        if action is None:
            name = arguments[0] if arguments else ""
            return ActionResult.failure(UndefinedCommandActionError(f"undefined command: '{name}'"))

        logger.debug("Execution de la commande", command=command.value, arguments=arguments)
        try:
            return action(arguments)
        except ApplicationError as error:
            return ActionResult.failure(error)

    def describe(self, error: ApplicationError) -> str:
        """Ligne d'erreur localisee ; repli sur le message brut de l'erreur."""
        return self._localizer.message(error.message_key, default=str(error))

    def end_of_input(self) -> ActionResult:
        """
        Fin de l'entree (ligne vide ou None) : execute l'action quit.

        L'issue est toujours TERMINATE, quelle que soit celle de l'action.
        """
        logger.info("Fin de l'entree, arret du shell")
        print(file=self._output)
        self._actions[Command.QUIT]([Command.QUIT.value])
        return ActionResult.ok(Outcome.TERMINATE)

    def run(self, input_stream: TextIO) -> None:
        """Boucle jusqu'a ce qu'une action retourne Outcome.TERMINATE."""
        print(file=self._output)
        print(self._localizer.message("application.ready"), file=self._output)

        outcome = Outcome.CONTINUE
        while outcome is Outcome.CONTINUE:
            try:
                self._output.write(PROMPT)
                self._output.flush()

                line = input_stream.readline()
                result = self.end_of_input() if not line else self.dispatch(line)
                if result.failed:
                    logger.info(
                        "Commande en echec",
                        kind=result.error.kind(),
                        detail=str(result.error),
                    )
                    print(self.describe(result.error), file=self._output)
                outcome = result.outcome
            finally:
                self._output.flush()


def run(
    input_stream: TextIO,
    output_stream: TextIO,
    catalog: IMovieCatalog,
    localizer: ILocalizer,
) -> None:
    """Construit les actions et le dispatcher, puis lance la boucle interactive."""
    actions = CommandActions(catalog, localizer, output_stream)
    dispatcher = CommandDispatcher(actions.table(), localizer, output_stream)
    dispatcher.run(input_stream)
