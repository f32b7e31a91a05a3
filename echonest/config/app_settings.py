import logging
import sys
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import Field, SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict, YamlConfigSettingsSource

from echonest.config.field_validators import (
    BaseURL,
    CLIOverrideSetting,
    RequestTimeout,
    validate_raw_cli_overrides,
)
from echonest.utils.constants import (
    ECHONEST_API_BASE_URL,
    ECHONEST_API_VERSION,
    ECHONEST_OUTPUT_FORMAT,
    ENV_PREFIX,
    PARAM_API_KEY,
    PARAM_FORMAT,
    PARAM_VERSION,
)
from echonest.utils.exceptions import AppConfigException

_LOGGER = logging.getLogger(__name__)

_REDACTED = "**********"


class AppSettings(BaseSettings):
    """
    Pydantic settings class encapsulating the `echonest` client config.
    Values are read from an optional yaml config, then `ECHONEST_`-prefixed env vars.
    """

    model_config = SettingsConfigDict(frozen=True, extra="ignore", env_prefix=ENV_PREFIX)
    api_key: SecretStr = Field(min_length=1)
    base_url: BaseURL = Field(default=ECHONEST_API_BASE_URL)
    api_version: str = Field(default=ECHONEST_API_VERSION, min_length=1)
    output_format: Literal["json"] = Field(default=ECHONEST_OUTPUT_FORMAT)
    request_timeout_seconds: float = Field(
        ge=RequestTimeout.MIN.value, le=RequestTimeout.MAX.value, default=RequestTimeout.DEFAULT.value
    )

    def default_params(self) -> dict[str, str]:
        """The params appended to every Echo Nest API request."""
        return {
            PARAM_API_KEY: self.api_key.get_secret_value(),
            PARAM_FORMAT: self.output_format,
            PARAM_VERSION: self.api_version,
        }

    def redacted_dump(self) -> dict[str, Any]:
        dumped = self.model_dump()
        dumped["api_key"] = _REDACTED
        return dumped

    def pretty_print_config(self) -> None:
        yaml.dump(self.redacted_dump(), sys.stdout)


def get_app_settings(src_yaml_filepath: Path | None = None, cli_overrides: dict[str, Any] | None = None) -> AppSettings:
    """
    Returns the read-only `echonest` client settings configured by the (optional) yaml config, env vars,
    plus any settings provided as options to the CLI. CLI options take precedence over the yaml settings,
    which take precedence over the env vars.
    """
    try:
        settings_data = _get_settings_data(src_yaml_filepath=src_yaml_filepath, cli_overrides=cli_overrides)
        app_settings = AppSettings(**settings_data)
    except (ValidationError, ValueError) as ve:
        if isinstance(ve, ValidationError):
            _LOGGER.error(f"Invalid app config. Validation errors: {ve.errors(include_input=False)}")
            raise AppConfigException("Invalid echonest config settings. See echonest/config/init_conf.yaml") from ve
        _LOGGER.error("Invalid CLI overrides provided to app config.", exc_info=True)
        raise AppConfigException("Invalid CLI overrides provided to app config.") from ve
    return app_settings


def _get_settings_data(src_yaml_filepath: Path | None, cli_overrides: dict[str, Any] | None) -> dict[str, Any]:
    settings_data: dict[str, Any] = {}
    if src_yaml_filepath is not None:
        yaml_source = YamlConfigSettingsSource(AppSettings, yaml_file=src_yaml_filepath)
        settings_data.update(yaml_source())
    if cli_overrides:
        validate_raw_cli_overrides(cli_overrides)
        for raw_k, raw_v in cli_overrides.items():
            settings_data[CLIOverrideSetting[raw_k.upper()].value] = raw_v
    return settings_data


def load_init_config_template() -> str:
    """Returns the contents of the template yaml config shipped with the package."""
    with open(Path(__file__).parent / "init_conf.yaml") as f:
        return f.read()
