from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import httpx

from echonest.config.app_settings import AppSettings
from echonest.models.types import HttpVerb
from echonest.utils.constants import (
    AUTHENTICATION_HTTP_STATUSES,
    AUTHENTICATION_STATUS_CODES,
    ECHONEST_API_PATH_PREFIX,
    ENVELOPE_RESPONSE_KEY,
    ENVELOPE_STATUS_CODE_KEY,
    ENVELOPE_STATUS_KEY,
    ENVELOPE_STATUS_MESSAGE_KEY,
    STATUS_CODE_SUCCESS,
)
from echonest.utils.exceptions import AuthenticationError, ServiceError, TransportError
from echonest.utils.httpx_utils.base_client import LOGGER, APIBaseClient

_MULTI_VALUE_TYPES = (list, tuple, set, frozenset)

ParamValue = str | list[str]


@dataclass(frozen=True)
class DispatchResult:
    """The decoded JSON body of an Echo Nest API response, alongside the HTTP status code it came with."""

    status_code: int
    body: dict[str, Any]


def _render_param_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def normalize_options(options: Mapping[str, Any] | None) -> dict[str, ParamValue]:
    """
    Renders an options mapping into string params. Multi-valued options become lists, which httpx sends
    as repeated keys (i.e. `bucket=songs&bucket=terms`). `None` values are dropped.
    """
    normalized: dict[str, ParamValue] = {}
    for key, value in (options or {}).items():
        if value is None:
            continue
        if isinstance(value, _MULTI_VALUE_TYPES):
            # sets have no stable order, sort them so the rendered params are deterministic
            values = sorted(value, key=str) if isinstance(value, (set, frozenset)) else value
            normalized[key] = [_render_param_value(v) for v in values if v is not None]
        else:
            normalized[key] = _render_param_value(value)
    return normalized


def encode_options(options: Mapping[str, Any] | None) -> str:
    """Returns the url-encoded query string rendering of an options mapping."""
    return str(httpx.QueryParams(normalize_options(options)))


class EchonestAPIClient(APIBaseClient):
    """
    Echo Nest-specific subclass of the APIBaseClient. Sends one synchronous request per `dispatch` call,
    with the api key, output format and api version params from the app settings appended to every call.
    The client holds no mutable state across calls, so a single instance may be shared between threads.
    """

    def __init__(self, app_settings: AppSettings, transport: httpx.BaseTransport | None = None):
        super().__init__(
            base_api_url=app_settings.base_url,
            timeout_seconds=app_settings.request_timeout_seconds,
            transport=transport,
        )
        self._default_params = app_settings.default_params()

    def dispatch(self, verb: HttpVerb | str, path: str, options: Mapping[str, Any] | None = None) -> DispatchResult:
        """
        Sends a single request to the Echo Nest API and returns the decoded JSON body with the HTTP status code.
        Raises a `TransportError` if the request cannot complete or the body is not a JSON object,
        an `AuthenticationError` if the api key is rejected, and a `ServiceError` for any other
        non-success status reported by the API.
        """
        verb = HttpVerb(verb)
        if not path.startswith(ECHONEST_API_PATH_PREFIX):
            raise ValueError(f"Invalid Echo Nest API path: '{path}'. Paths must start with '{ECHONEST_API_PATH_PREFIX}'")
        params = self._default_params | normalize_options(options)
        LOGGER.debug(f"{self.__class__.__name__}: {verb.value} {path} ...")
        try:
            match verb:
                case HttpVerb.GET:
                    response = self._client.get(path, params=params)
                case HttpVerb.POST:
                    response = self._client.post(path, data=params)
        except httpx.TransportError as te:
            LOGGER.error(f"Echo Nest API request failed: {verb.value} {path}", exc_info=True)
            raise TransportError(
                f"Echo Nest API request {verb.value} {path} could not complete: {type(te).__name__}"
            ) from te
        LOGGER.debug(f"{self.__class__.__name__}: {verb.value} {path} returned HTTP status {response.status_code}")
        body = self._decode_body(response=response, verb=verb, path=path)
        self._raise_for_status(response=response, body=body)
        return DispatchResult(status_code=response.status_code, body=body)

    def _decode_body(self, response: httpx.Response, verb: HttpVerb, path: str) -> dict[str, Any]:
        try:
            body = response.json()
        except ValueError as ve:
            raise TransportError(
                f"Malformed response body from {verb.value} {path} (HTTP status {response.status_code}): not valid JSON."
            ) from ve
        if not isinstance(body, dict):
            raise TransportError(
                f"Malformed response body from {verb.value} {path} (HTTP status {response.status_code}): not a JSON object."
            )
        return body

    def _raise_for_status(self, response: httpx.Response, body: dict[str, Any]) -> None:
        """
        Raises the matching exception for a non-success envelope status code. Responses with no envelope
        status fall back to the HTTP status code.
        """
        envelope = body.get(ENVELOPE_RESPONSE_KEY)
        status = envelope.get(ENVELOPE_STATUS_KEY) if isinstance(envelope, dict) else None
        if not isinstance(status, dict):
            if response.status_code in AUTHENTICATION_HTTP_STATUSES:
                raise AuthenticationError(
                    f"Echo Nest API rejected the request credentials. HTTP status: {response.status_code}",
                    http_status=response.status_code,
                )
            if response.is_error:
                raise ServiceError(
                    f"Unexpected Echo Nest API error. HTTP status: {response.status_code}",
                    http_status=response.status_code,
                )
            return
        raw_code = status.get(ENVELOPE_STATUS_CODE_KEY, STATUS_CODE_SUCCESS)
        message = str(status.get(ENVELOPE_STATUS_MESSAGE_KEY) or "")
        try:
            code = int(raw_code)
        except (TypeError, ValueError) as ex:
            raise ServiceError(
                f"Unrecognized Echo Nest API status code: '{raw_code}'. Message: '{message}'",
                http_status=response.status_code,
            ) from ex
        if code == STATUS_CODE_SUCCESS and not response.is_error:
            return
        if code in AUTHENTICATION_STATUS_CODES or response.status_code in AUTHENTICATION_HTTP_STATUSES:
            raise AuthenticationError(message, status_code=code, http_status=response.status_code)
        raise ServiceError(
            message or f"Unexpected Echo Nest API error. HTTP status: {response.status_code}",
            status_code=code,
            http_status=response.status_code,
        )
