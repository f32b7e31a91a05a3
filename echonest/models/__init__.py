from echonest.models.entities import (
    Artist,
    ArtistLocation,
    ArtistUrls,
    Biography,
    Blog,
    DocCounts,
    EchonestEntity,
    Familiarity,
    ForeignId,
    Genre,
    GenreUrls,
    Hotttnesss,
    Image,
    License,
    NewsArticle,
    Review,
    Song,
    Term,
    Video,
    YearsActive,
)
from echonest.models.mapping import entities_from, entity_from, extract_payload
from echonest.models.types import EntityCardinality, HttpVerb

__all__ = [
    "Artist",
    "ArtistLocation",
    "ArtistUrls",
    "Biography",
    "Blog",
    "DocCounts",
    "EchonestEntity",
    "Familiarity",
    "ForeignId",
    "Genre",
    "GenreUrls",
    "Hotttnesss",
    "Image",
    "License",
    "NewsArticle",
    "Review",
    "Song",
    "Term",
    "Video",
    "YearsActive",
    "entities_from",
    "entity_from",
    "extract_payload",
    "EntityCardinality",
    "HttpVerb",
]
