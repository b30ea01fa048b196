"""
Hierarchie des exceptions de MovieBuddy.

Les erreurs applicatives (ApplicationError) sont les seules recuperees par la
boucle interactive : elles sont converties en une ligne de message localisee
et la boucle continue. Toutes les autres erreurs remontent et terminent le
processus.

Hierarchie
----------
MovieBuddyError
├── ApplicationError
│   ├── InvalidCommandArgumentsError
│   └── UndefinedCommandActionError
├── CommandTableError
├── MetadataLoadError
└── MessageNotFoundError
"""

from typing import Optional


class MovieBuddyError(Exception):
    """Exception de base pour toutes les erreurs MovieBuddy."""


# --- Erreurs applicatives (recuperables) -------------------------------------


class ApplicationError(MovieBuddyError):
    """
    Erreur recuperable au niveau de la boucle de commandes.

    Le type d'erreur (kind) est derive du nom de la classe sans le suffixe
    "Error" et sert a construire la cle du message localise.
    """

    @classmethod
    def kind(cls) -> str:
        """Type d'erreur, ex: "InvalidCommandArguments"."""
        name = cls.__name__
        return name[: -len("Error")] if name.endswith("Error") else name

    @property
    def message_key(self) -> str:
        """Cle du message localise, ex: "application.errors.InvalidCommandArguments"."""
        return f"application.errors.{self.kind()}"


class InvalidCommandArgumentsError(ApplicationError):
    """Arguments manquants ou mal formes pour une commande reconnue."""

    def __init__(self, message: str = "invalid command arguments") -> None:
        super().__init__(message)


class UndefinedCommandActionError(ApplicationError):
    """Saisie ne correspondant a aucune commande, ou commande sans action liee."""

    def __init__(self, message: str = "undefined command action") -> None:
        super().__init__(message)


# --- Erreurs de configuration et de collaborateurs (fatales) -----------------


class CommandTableError(MovieBuddyError, ValueError):
    """
    Table d'actions incomplete.

    Levee a la construction du dispatcher quand une commande n'a pas d'action.

    Attributes:
        missing: Noms des commandes sans action
    """

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"No action bound for command(s): {', '.join(missing)}")


class MetadataLoadError(MovieBuddyError):
    """
    Echec du chargement des metadonnees de films.

    Attributes:
        location: Emplacement des metadonnees (chemin ou URL)
    """

    def __init__(self, message: str, location: Optional[str] = None) -> None:
        self.location = location
        super().__init__(message if location is None else f"{message} ({location})")


class MessageNotFoundError(MovieBuddyError, LookupError):
    """
    Cle de message absente de tous les bundles et sans texte par defaut.

    Attributes:
        key: Cle de message recherchee
        locale: Locale utilisee pour la recherche
    """

    def __init__(self, key: str, locale: str) -> None:
        self.key = key
        self.locale = locale
        super().__init__(f"No message found under code '{key}' for locale '{locale}'")
