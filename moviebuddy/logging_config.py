"""
Journalisation de MovieBuddy via loguru.

Le shell ecrit sur stdout ; les logs vont donc sur stderr (niveau
log_level, WARNING par defaut) et, si log_file est defini, dans un fichier
JSON a rotation qui recoit tout a partir de DEBUG.
"""

import sys
from typing import TextIO

from loguru import logger

from moviebuddy.config import Settings

# Format compact : le contexte passe en mots-cles apparait dans {extra}
CONSOLE_FORMAT = "<level>{level: <8}</level> <cyan>{name}</cyan> | <level>{message}</level> <dim>{extra}</dim>"


def configure_logging(settings: Settings, stream: TextIO = sys.stderr) -> list[int]:
    """Remplace les handlers loguru d'apres la configuration.

    Args :
        settings : Parametres (log_level, log_file, rotation, retention)
        stream : Flux de la sortie console

    Retourne :
        Identifiants des handlers ajoutes (console, puis fichier s'il existe)
    """
    logger.remove()
    handler_ids = [
        logger.add(stream, level=settings.log_level.upper(), format=CONSOLE_FORMAT)
    ]

    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        handler_ids.append(
            logger.add(
                settings.log_file,
                level="DEBUG",
                serialize=True,
                rotation=settings.log_rotation_size,
                retention=settings.log_retention_count,
                compression="zip",
            )
        )

    logger.debug("Journalisation prete", level=settings.log_level, log_file=str(settings.log_file))
    return handler_ids
