"""
Declarative table of the Echo Nest API operations exposed by the `EchonestFacade`.
Each row pins the HTTP verb, the API path, the entity shape of the payload, the envelope key
the payload is stored under, and whether the payload is one entity or an array of them.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

from echonest.models.entities import (
    Artist,
    ArtistUrls,
    Biography,
    Blog,
    EchonestEntity,
    Familiarity,
    Genre,
    Hotttnesss,
    Image,
    NewsArticle,
    Review,
    Song,
    Term,
    Video,
)
from echonest.models.types import EntityCardinality, HttpVerb


@dataclass(frozen=True)
class Endpoint:
    verb: HttpVerb
    path: str
    entity_shape: type[EchonestEntity]
    envelope_key: str
    cardinality: EntityCardinality = EntityCardinality.MANY

    @property
    def returns_many(self) -> bool:
        return self.cardinality == EntityCardinality.MANY


_ONE = EntityCardinality.ONE
_GET = HttpVerb.GET

ENDPOINT_TABLE: Final[Mapping[str, Endpoint]] = MappingProxyType(
    {
        # artist
        "artist_biographies": Endpoint(_GET, "/api/v4/artist/biographies", Biography, "biographies"),
        "artist_blogs": Endpoint(_GET, "/api/v4/artist/blogs", Blog, "blogs"),
        "artist_extract": Endpoint(_GET, "/api/v4/artist/extract", Artist, "artists"),
        "artist_familiarity": Endpoint(_GET, "/api/v4/artist/familiarity", Familiarity, "artist", _ONE),
        "artist_hotttnesss": Endpoint(_GET, "/api/v4/artist/hotttnesss", Hotttnesss, "artist", _ONE),
        "artist_images": Endpoint(_GET, "/api/v4/artist/images", Image, "images"),
        "artist_list_genres": Endpoint(_GET, "/api/v4/artist/list_genres", Genre, "genres"),
        "artist_list_terms": Endpoint(_GET, "/api/v4/artist/list_terms", Term, "terms"),
        "artist_news": Endpoint(_GET, "/api/v4/artist/news", NewsArticle, "news"),
        "artist_profile": Endpoint(_GET, "/api/v4/artist/profile", Artist, "artist", _ONE),
        "artist_search": Endpoint(_GET, "/api/v4/artist/search", Artist, "artists"),
        "artist_reviews": Endpoint(_GET, "/api/v4/artist/reviews", Review, "reviews"),
        "artist_similar": Endpoint(_GET, "/api/v4/artist/similar", Artist, "artists"),
        "artist_songs": Endpoint(_GET, "/api/v4/artist/songs", Song, "songs"),
        "artist_suggest": Endpoint(_GET, "/api/v4/artist/suggest", Artist, "artists"),
        "artist_terms": Endpoint(_GET, "/api/v4/artist/terms", Term, "terms"),
        "artist_twitter": Endpoint(_GET, "/api/v4/artist/twitter", Artist, "artist", _ONE),
        "artist_urls": Endpoint(_GET, "/api/v4/artist/urls", ArtistUrls, "urls", _ONE),
        "artist_video": Endpoint(_GET, "/api/v4/artist/video", Video, "video"),
        # song
        "song_search": Endpoint(_GET, "/api/v4/song/search", Song, "songs"),
        "song_profile": Endpoint(_GET, "/api/v4/song/profile", Song, "songs"),
        # genre
        "genre_artists": Endpoint(_GET, "/api/v4/genre/artists", Artist, "artists"),
        "genre_list": Endpoint(_GET, "/api/v4/genre/list", Genre, "genres"),
        "genre_profile": Endpoint(_GET, "/api/v4/genre/profile", Genre, "genres"),
        "genre_search": Endpoint(_GET, "/api/v4/genre/search", Genre, "genres"),
        "genre_similar": Endpoint(_GET, "/api/v4/genre/similar", Genre, "genres"),
    }
)
