"""
Configuration de la base de donnees pour les metadonnees de films.

Ce module fournit :
- Creation d'un engine a partir d'une URL SQLAlchemy
- Fonction d'initialisation des tables
"""

from pathlib import Path

from sqlalchemy import Engine
from sqlmodel import SQLModel, create_engine

# Enregistre les tables dans SQLModel.metadata
from moviebuddy.infrastructure.persistence import models  # noqa: F401


def create_db_engine(database_url: str) -> Engine:
    """
    Cree un engine pour l'URL donnee.

    Cree le repertoire parent si l'URL designe un fichier SQLite.

    Args:
        database_url: URL SQLAlchemy (ex: "sqlite:///movies.db")
    """
    if database_url.startswith("sqlite:///") and not database_url.startswith("sqlite:///:memory:"):
        db_path = Path(database_url.replace("sqlite:///", ""))
        db_path.parent.mkdir(exist_ok=True, parents=True)

    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    return create_engine(database_url, echo=False, connect_args=connect_args)


def init_db(engine: Engine) -> None:
    """Cree toutes les tables si elles n'existent pas."""
    SQLModel.metadata.create_all(engine)
