"""MovieBuddy - recherche interactive de films par realisateur ou annee de sortie."""

__version__ = "0.1.0"
