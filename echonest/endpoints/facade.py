import logging
from collections.abc import Mapping
from typing import Any

from echonest.endpoints.endpoint_table import ENDPOINT_TABLE, Endpoint
from echonest.models.entities import EchonestEntity
from echonest.models.mapping import entities_from, entity_from, extract_payload
from echonest.utils.exceptions import UnknownOperationError
from echonest.utils.httpx_utils.echonest_client import EchonestAPIClient

_LOGGER = logging.getLogger(__name__)


class EchonestFacade:
    """
    Single entrypoint for every operation in the `ENDPOINT_TABLE`. Each call dispatches one request through the
    wrapped `EchonestAPIClient`, pulls the payload out of the response envelope, and maps it into entity records.
    """

    def __init__(self, client: EchonestAPIClient, endpoint_table: Mapping[str, Endpoint] = ENDPOINT_TABLE):
        self._client = client
        self._endpoint_table = endpoint_table

    @property
    def operations(self) -> list[str]:
        return sorted(self._endpoint_table.keys())

    def get_endpoint(self, operation: str) -> Endpoint:
        try:
            return self._endpoint_table[operation]
        except KeyError as ke:
            raise UnknownOperationError(operation=operation, valid_operations=self._endpoint_table.keys()) from ke

    def call(
        self, operation: str, options: Mapping[str, Any] | None = None, **kwargs: Any
    ) -> EchonestEntity | list[EchonestEntity]:
        """
        Runs the named operation. Options may be given as a mapping, as keyword arguments, or both
        (keyword arguments win). Returns a single entity for single-entity endpoints, otherwise a list.
        Example: `facade.call("artist_biographies", id="ARH6W4X1187B99274F", license=["cc-by-sa", "cc-by"])`
        """
        endpoint = self.get_endpoint(operation)
        merged_options = dict(options or {}) | kwargs
        _LOGGER.debug(f"Calling Echo Nest operation '{operation}' ...")
        result = self._client.dispatch(verb=endpoint.verb, path=endpoint.path, options=merged_options)
        payload = extract_payload(body=result.body, envelope_key=endpoint.envelope_key)
        if endpoint.returns_many:
            return entities_from(payload, endpoint.entity_shape)
        return entity_from(payload, endpoint.entity_shape)
