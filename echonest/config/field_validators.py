"""
Various field validator definitions for the Pydantic models representing
the `echonest` client config. For more on Pydantic field validators, see the link below:
https://docs.pydantic.dev/latest/concepts/validators/#field-validators
"""

from enum import IntEnum, StrEnum, unique
from typing import Annotated, Any

from pydantic import AfterValidator

from echonest.utils.constants import ECHONEST_API_PATH_PREFIX


@unique
class RequestTimeout(IntEnum):
    """Enum of the per-request timeout settings bounds, in seconds."""

    DEFAULT = 10
    MIN = 1
    MAX = 120


@unique
class CLIOverrideSetting(StrEnum):
    """
    Enum of CLI param names which can override their equivalent AppSettings fields.
    Values should reference the settings class' attr name.
    """

    API_KEY = "api_key"
    BASE_URL = "base_url"
    REQUEST_TIMEOUT = "request_timeout_seconds"


def validate_raw_cli_overrides(value: dict[str, Any]) -> dict[str, Any]:
    """Validates the CLI-provided settings overrides, if any."""
    valid_keys = set([member.name for member in CLIOverrideSetting])
    for k in value.keys():
        if k.upper() not in valid_keys:
            raise ValueError(f"Invalid CLI override setting: '{k}'. Valid settings are: {sorted(valid_keys)}")
    return value


def validate_base_url(value: str) -> str:
    if not value.startswith(("http://", "https://")):
        raise ValueError(f"base_url must be an http(s) URL. Got: '{value}'")
    if ECHONEST_API_PATH_PREFIX.rstrip("/") in value:
        raise ValueError(f"base_url must be the bare host, without the '{ECHONEST_API_PATH_PREFIX}' path prefix.")
    return value.rstrip("/")


BaseURL = Annotated[str, AfterValidator(validate_base_url)]
