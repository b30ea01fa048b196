"""
Interface port pour la localisation des messages.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, Optional


class ILocalizer(ABC):
    """
    Interface de resolution des messages localises.

    Associe une cle de message, des arguments et une locale a un texte formate.
    """

    @abstractmethod
    def message(
        self,
        key: str,
        args: Sequence[Any] = (),
        default: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> str:
        """
        Retourne le message formate pour la cle donnee.

        Args:
            key: Cle du message (ex: "application.ready")
            args: Arguments positionnels ({0}, {1}, ...)
            default: Texte retourne si la cle est absente
            locale: Locale a utiliser (defaut: locale du processus)

        Raises:
            MessageNotFoundError: Si la cle est absente et sans defaut
        """
        ...
