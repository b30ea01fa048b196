"""
Business entities representing core domain concepts.

Exports:
- Movie: A watched movie from the metadata catalog
- WATCHED_DATE_FORMAT: Output pattern for watched dates
"""

from moviebuddy.core.entities.movie import WATCHED_DATE_FORMAT, Movie

__all__ = [
    "Movie",
    "WATCHED_DATE_FORMAT",
]
