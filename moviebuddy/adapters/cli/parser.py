"""
Analyse des lignes saisies dans le shell interactif.

Une ligne est decoupee en jetons (separes par des espaces) ; le premier jeton
designe la commande, sans tenir compte de la casse. La liste complete des
jetons, nom de commande compris, est transmise a l'action liee.
"""

from enum import Enum
from typing import Optional


class Command(Enum):
    """Commandes reconnues par le shell (ensemble ferme)."""

    QUIT = "quit"
    DIRECTED_BY = "directedBy"
    RELEASED_YEAR_BY = "releasedYearBy"

    @classmethod
    def parse(cls, text: Optional[str]) -> Optional["Command"]:
        """
        Retourne la commande dont le nom correspond a text (insensible a la casse).

        Returns:
            La commande, ou None si text est vide ou inconnu
        """
        if not text:
            return None
        lowered = text.casefold()
        for command in cls:
            if command.value.casefold() == lowered:
                return command
        return None


def tokenize(raw_line: Optional[str]) -> list[str]:
    """Decoupe une ligne en jetons non vides ; None donne une liste vide."""
    if raw_line is None:
        return []
    return [token.strip() for token in raw_line.split() if token.strip()]


def parse(raw_line: Optional[str]) -> Optional[Command]:
    """Resout la commande d'une ligne brute, ou None si aucune ne correspond."""
    tokens = tokenize(raw_line)
    return Command.parse(tokens[0]) if tokens else None
