"""
Source de messages localises basee sur des bundles JSON.

Les bundles sont des fichiers "<basename>[_<langue>[_<REGION>]].json" dans un
repertoire de ressources. Pour la locale "ko_KR", la recherche d'une cle suit
l'ordre : messages_ko_KR.json, messages_ko.json, messages.json.

Les messages utilisent des arguments positionnels au format str.format :
"{0} movies found."
"""

import json
import os
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Optional

from loguru import logger

from moviebuddy.core.exceptions import MessageNotFoundError
from moviebuddy.core.ports.localizer import ILocalizer

# Bundles livres avec le paquet
DEFAULT_BUNDLE_DIR = Path(__file__).resolve().parent.parent.parent / "resources" / "i18n"
DEFAULT_BASENAME = "messages"

# Variables d'environnement consultees, par priorite (convention POSIX)
LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")


def normalize_locale(value: Optional[str]) -> str:
    """
    Normalise une locale POSIX ou BCP 47 au format "langue[_REGION]".

    Exemples: "ko_KR.UTF-8" -> "ko_KR", "en-us" -> "en_US", "C" -> "".
    """
    if not value:
        return ""
    value = value.split(".", 1)[0].split("@", 1)[0].replace("-", "_")
    if value in ("C", "POSIX"):
        return ""
    language, _, region = value.partition("_")
    return f"{language.lower()}_{region.upper()}" if region else language.lower()


def default_locale() -> str:
    """Locale par defaut du processus, lue dans l'environnement ("" si absente)."""
    for name in LOCALE_ENV_VARS:
        locale = normalize_locale(os.environ.get(name))
        if locale:
            return locale
    return ""


def candidate_suffixes(locale: str) -> list[str]:
    """Suffixes de bundles a consulter, du plus specifique au bundle de base."""
    suffixes = []
    if locale:
        language, _, region = locale.partition("_")
        if region:
            suffixes.append(f"_{language}_{region}")
        suffixes.append(f"_{language}")
    suffixes.append("")
    return suffixes


class MessageSourceLocalizer(ILocalizer):
    """
    Localiseur lisant des bundles JSON plats (cle -> gabarit).

    Les bundles sont charges a la demande puis conserves en memoire.
    Un bundle absent est traite comme vide.
    """

    def __init__(
        self,
        locale: Optional[str] = None,
        bundle_dir: Path = DEFAULT_BUNDLE_DIR,
        basename: str = DEFAULT_BASENAME,
    ) -> None:
        """
        Args:
            locale: Locale par defaut (None = locale de l'environnement)
            bundle_dir: Repertoire contenant les bundles JSON
            basename: Prefixe des fichiers de bundles
        """
        self._locale = normalize_locale(locale) if locale else default_locale()
        self._bundle_dir = Path(bundle_dir)
        self._basename = basename
        self._bundles: dict[str, dict[str, str]] = {}

    @property
    def locale(self) -> str:
        return self._locale

    def _bundle(self, suffix: str) -> dict[str, str]:
        if suffix not in self._bundles:
            path = self._bundle_dir / f"{self._basename}{suffix}.json"
            if path.is_file():
                with open(path, encoding="utf-8") as f:
                    self._bundles[suffix] = json.load(f)
                logger.debug("Bundle de messages charge", path=str(path))
            else:
                self._bundles[suffix] = {}
        return self._bundles[suffix]

    def resolve(self, key: str, locale: Optional[str] = None) -> Optional[str]:
        """Retourne le gabarit brut de la cle, ou None si absente."""
        resolved_locale = normalize_locale(locale) if locale else self._locale
        for suffix in candidate_suffixes(resolved_locale):
            template = self._bundle(suffix).get(key)
            if template is not None:
                return template
        return None

    def message(
        self,
        key: str,
        args: Sequence[Any] = (),
        default: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> str:
        template = self.resolve(key, locale)
        if template is None:
            if default is None:
                raise MessageNotFoundError(key, normalize_locale(locale) if locale else self._locale)
            # Le texte par defaut n'est formate que s'il y a des arguments
            template = default
            if not args:
                return template
        return template.format(*args)
