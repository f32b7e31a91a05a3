"""
Frozen record types for the payloads returned by the Echo Nest v4 API.
Every field is optional since the API only returns the fields requested via `bucket` params,
and unknown fields are ignored so that upstream additions never break decoding.
Scalar fields are copied verbatim from the decoded JSON: their annotations describe the documented
upstream type, but a value of another JSON type is stored as-is rather than coerced or rejected.
Only fields holding nested entities (or lists of them) are validated.
"""

from functools import cache
from typing import Any, get_args, get_origin

from pydantic import BaseModel, ConfigDict, ValidationInfo, ValidatorFunctionWrapHandler, field_validator


def _holds_nested_values(annotation: Any) -> bool:
    origin = get_origin(annotation)
    if origin is list:
        return True
    if origin is not None:
        return any(_holds_nested_values(arg) for arg in get_args(annotation))
    return isinstance(annotation, type) and issubclass(annotation, BaseModel)


@cache
def _is_scalar_field(entity_cls: type[BaseModel], field_name: str) -> bool:
    return not _holds_nested_values(entity_cls.model_fields[field_name].annotation)


class EchonestEntity(BaseModel):
    """Base class for all entity records. Immutable after construction, non-strict about unknown keys."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("*", mode="wrap")
    @classmethod
    def copy_scalar_fields_verbatim(
        cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
    ) -> Any:
        if info.field_name is not None and _is_scalar_field(cls, info.field_name):
            return value
        return handler(value)


class License(EchonestEntity):
    type: str | None = None
    attribution: str | None = None
    url: str | None = None
    attribution_url: str | None = None


class Biography(EchonestEntity):
    text: str | None = None
    site: str | None = None
    url: str | None = None
    truncated: bool | None = None
    license: License | None = None


class Blog(EchonestEntity):
    id: str | None = None
    name: str | None = None
    url: str | None = None
    summary: str | None = None
    date_posted: str | None = None
    date_found: str | None = None


class NewsArticle(EchonestEntity):
    id: str | None = None
    name: str | None = None
    url: str | None = None
    summary: str | None = None
    date_posted: str | None = None
    date_found: str | None = None


class Review(EchonestEntity):
    id: str | None = None
    name: str | None = None
    url: str | None = None
    summary: str | None = None
    release: str | None = None
    image_url: str | None = None
    date_reviewed: str | None = None
    date_found: str | None = None


class Image(EchonestEntity):
    url: str | None = None
    width: int | None = None
    height: int | None = None
    license: License | None = None


class Term(EchonestEntity):
    """A descriptive term (style or mood). Terms have no identifier of their own: the name doubles as the id."""

    name: str | None = None
    frequency: float | None = None
    weight: float | None = None

    @property
    def id(self) -> str | None:
        return self.name


class GenreUrls(EchonestEntity):
    wikipedia_url: str | None = None


class Genre(EchonestEntity):
    name: str | None = None
    description: str | None = None
    similarity: float | None = None
    urls: GenreUrls | None = None


class Familiarity(EchonestEntity):
    id: str | None = None
    name: str | None = None
    familiarity: float | None = None


class Hotttnesss(EchonestEntity):
    id: str | None = None
    name: str | None = None
    hotttnesss: float | None = None


class ArtistLocation(EchonestEntity):
    location: str | None = None
    city: str | None = None
    region: str | None = None
    country: str | None = None


class ArtistUrls(EchonestEntity):
    official_url: str | None = None
    lastfm_url: str | None = None
    myspace_url: str | None = None
    wikipedia_url: str | None = None
    mb_url: str | None = None
    amazon_url: str | None = None
    itunes_url: str | None = None
    aolmusic_url: str | None = None


class YearsActive(EchonestEntity):
    start: int | None = None
    end: int | None = None


class ForeignId(EchonestEntity):
    catalog: str | None = None
    foreign_id: str | None = None


class DocCounts(EchonestEntity):
    biographies: int | None = None
    blogs: int | None = None
    images: int | None = None
    news: int | None = None
    reviews: int | None = None
    songs: int | None = None
    video: int | None = None


class Video(EchonestEntity):
    id: str | None = None
    title: str | None = None
    url: str | None = None
    site: str | None = None
    image_url: str | None = None
    date_found: str | None = None


class Song(EchonestEntity):
    id: str | None = None
    title: str | None = None
    artist_id: str | None = None
    artist_name: str | None = None
    song_hotttnesss: float | None = None
    artist_familiarity: float | None = None
    artist_hotttnesss: float | None = None


class Artist(EchonestEntity):
    """
    An artist record. Only `id` and `name` are returned by default, the remaining fields are
    populated when the matching `bucket` param is sent with the request.
    """

    id: str | None = None
    name: str | None = None
    twitter: str | None = None
    familiarity: float | None = None
    hotttnesss: float | None = None
    discovery: float | None = None
    artist_location: ArtistLocation | None = None
    biographies: list[Biography] | None = None
    blogs: list[Blog] | None = None
    images: list[Image] | None = None
    news: list[NewsArticle] | None = None
    reviews: list[Review] | None = None
    songs: list[Song] | None = None
    terms: list[Term] | None = None
    genres: list[Genre] | None = None
    urls: ArtistUrls | None = None
    video: list[Video] | None = None
    years_active: list[YearsActive] | None = None
    doc_counts: DocCounts | None = None
    foreign_ids: list[ForeignId] | None = None
