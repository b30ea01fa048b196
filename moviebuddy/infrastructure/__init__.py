"""Infrastructure : persistance SQLModel des metadonnees de films."""
