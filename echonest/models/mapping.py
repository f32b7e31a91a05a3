"""
Helpers for turning decoded Echo Nest JSON payloads into entity records.
Field copying is delegated to the pydantic entity models, which copy scalar fields verbatim,
leave absent fields at `None` and drop unknown keys. Only gross shape mismatches are treated as errors.
"""

import logging
from typing import Any, TypeVar

from pydantic import ValidationError

from echonest.models.entities import EchonestEntity
from echonest.utils.constants import ENVELOPE_RESPONSE_KEY
from echonest.utils.exceptions import MappingError

_LOGGER = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=EchonestEntity)


def _json_type_name(decoded_value: Any) -> str:
    if decoded_value is None:
        return "null"
    if isinstance(decoded_value, dict):
        return "object"
    if isinstance(decoded_value, list):
        return "array"
    return type(decoded_value).__name__


def entity_from(decoded_value: Any, entity_shape: type[EntityT]) -> EntityT:
    """
    Builds one `entity_shape` instance from a single decoded JSON object.
    Raises a `MappingError` if `decoded_value` is not an object, or if a present nested-entity field holds a value
    of the wrong JSON shape (i.e. a string where a nested entity belongs). Scalar fields are never errors.
    """
    if not isinstance(decoded_value, dict):
        raise MappingError(
            f"Expected a JSON object to build a {entity_shape.__name__}, but found: {_json_type_name(decoded_value)}"
        )
    try:
        return entity_shape.model_validate(decoded_value)
    except ValidationError as ve:
        _LOGGER.debug(f"{entity_shape.__name__} validation errors: {ve.errors()}")
        raise MappingError(
            f"Decoded JSON object does not match the {entity_shape.__name__} shape: {ve.error_count()} field error(s)."
        ) from ve


def entities_from(decoded_value: Any, entity_shape: type[EntityT]) -> list[EntityT]:
    """
    Builds an ordered list of `entity_shape` instances from a decoded JSON array.
    A `None` (null / absent) payload yields an empty list.
    """
    if decoded_value is None:
        return []
    if not isinstance(decoded_value, list):
        raise MappingError(
            f"Expected a JSON array of {entity_shape.__name__} objects, but found: {_json_type_name(decoded_value)}"
        )
    return [entity_from(element, entity_shape) for element in decoded_value]


def extract_payload(body: dict[str, Any], envelope_key: str) -> Any:
    """
    Returns the value stored at `response.<envelope_key>` of a decoded response body, or `None` if the
    envelope has no such key. Raises a `MappingError` if the body carries no `response` envelope object.
    """
    envelope = body.get(ENVELOPE_RESPONSE_KEY) if isinstance(body, dict) else None
    if not isinstance(envelope, dict):
        raise MappingError(f"Response body is missing the '{ENVELOPE_RESPONSE_KEY}' envelope object.")
    return envelope.get(envelope_key)
