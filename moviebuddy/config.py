"""
Configuration de l'application via pydantic-settings.

La configuration est chargee depuis les variables d'environnement avec le prefixe
MOVIEBUDDY_, et peut optionnellement etre fournie via un fichier .env.

L'emplacement des metadonnees determine le lecteur utilise :
- URL SQLAlchemy (contient "://") : base de donnees
- fichier .xml : document XML
- tout autre fichier : CSV
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env a la racine du projet (parent de moviebuddy/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

# Metadonnees d'exemple livrees avec le paquet
DEFAULT_METADATA_LOCATION = Path(__file__).parent / "resources" / "movie_metadata.csv"

MetadataKind = Literal["csv", "xml", "database"]


class Settings(BaseSettings):
    """Parametres de l'application avec support des variables d'environnement.

    Tous les parametres peuvent etre surcharges via des variables d'environnement
    avec le prefixe MOVIEBUDDY_.
    Exemple : MOVIEBUDDY_METADATA_LOCATION=~/movies.xml

    Les chemins sont automatiquement etendus (~ -> repertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="MOVIEBUDDY_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Source des metadonnees (chemin de fichier ou URL de base de donnees)
    metadata_location: str = Field(default=str(DEFAULT_METADATA_LOCATION))

    # Locale des messages (defaut: locale de l'environnement du processus)
    locale: Optional[str] = Field(default=None)

    # Cache des metadonnees (expiration apres ecriture)
    cache_dir: Path = Field(default=Path("~/.cache/moviebuddy"))
    cache_ttl_seconds: int = Field(default=3, ge=0)

    # Logging (stderr silencieux par defaut, pas de fichier si log_file vaut None)
    log_level: str = Field(default="WARNING")
    log_file: Optional[Path] = Field(default=Path("logs/moviebuddy.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("cache_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Etend ~ vers le repertoire home dans les chemins (None conserve)."""
        return None if v is None else Path(v).expanduser()

    @field_validator("metadata_location", mode="before")
    @classmethod
    def expand_location(cls, v: str | Path) -> str:
        """Etend ~ pour les chemins de fichiers, laisse les URLs intactes."""
        text = str(v)
        if "://" in text:
            return text
        return str(Path(text).expanduser())

    @property
    def metadata_kind(self) -> MetadataKind:
        """Type de source deduit de metadata_location."""
        if "://" in self.metadata_location:
            return "database"
        if Path(self.metadata_location).suffix.lower() == ".xml":
            return "xml"
        return "csv"
