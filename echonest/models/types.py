from enum import StrEnum, unique


@unique
class HttpVerb(StrEnum):
    """The HTTP verbs the Echo Nest API accepts. GET params go in the query string, POST params in a form body."""

    GET = "GET"
    POST = "POST"


@unique
class EntityCardinality(StrEnum):
    """Whether an endpoint's envelope payload holds a single entity object or an array of them."""

    ONE = "one"
    MANY = "many"
