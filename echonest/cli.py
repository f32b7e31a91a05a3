"""
USAGE: echonest --help
"""

import json
import logging
from pathlib import Path
from typing import Any, Final

import click
from rich.table import Table

from echonest.config.app_settings import AppSettings, get_app_settings, load_init_config_template
from echonest.config.field_validators import CLIOverrideSetting
from echonest.endpoints.endpoint_table import ENDPOINT_TABLE
from echonest.endpoints.facade import EchonestFacade
from echonest.models.entities import EchonestEntity
from echonest.utils.cli_utils import DEFAULT_VERBOSITY, config_path_option, parse_option_pairs
from echonest.utils.exceptions import AppConfigException, EchonestClientException, UnknownOperationError
from echonest.utils.httpx_utils.echonest_client import EchonestAPIClient
from echonest.utils.log_utils import CONSOLE, DATE_FORMAT, FORMAT, create_rich_log_handler
from echonest.version import get_project_version

logging.basicConfig(level="NOTSET", format=FORMAT, datefmt=DATE_FORMAT, handlers=[create_rich_log_handler()])
_LOGGER = logging.getLogger()
# httpx logs full request URLs at INFO, which would include the api key query param
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

_APP_VERSION = get_project_version()
_OPTION_ENVVAR_PREFIX: Final[str] = "ECHONEST"
_GROUP_PARAMS_KEY: Final[str] = "group_params"


def _load_settings(ctx: click.Context, config: str | None) -> AppSettings:
    try:
        return get_app_settings(
            src_yaml_filepath=Path(config) if config else None, cli_overrides=ctx.obj.get(_GROUP_PARAMS_KEY)
        )
    except AppConfigException as ace:
        raise click.ClickException(str(ace)) from ace


def _to_jsonable(result: EchonestEntity | list[EchonestEntity]) -> Any:
    if isinstance(result, list):
        return [entity.model_dump(mode="json", exclude_none=True, warnings=False) for entity in result]
    return result.model_dump(mode="json", exclude_none=True, warnings=False)


# pylint: disable=unused-argument,no-value-for-parameter
@click.group(
    context_settings={"auto_envvar_prefix": _OPTION_ENVVAR_PREFIX},
    help="echonest: query the Echo Nest music metadata API from the command line.",
)
@click.version_option(version=_APP_VERSION, package_name="echonest", prog_name="echonest")
@click.option(
    "-v",
    "--verbosity",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=DEFAULT_VERBOSITY,
    show_default=True,
    help="Sets the logging level.",
)
@click.option("--api-key", type=click.STRING, required=False, show_envvar=True)
@click.option("--base-url", type=click.STRING, required=False, show_envvar=True)
@click.option("--request-timeout", type=click.FLOAT, required=False, show_envvar=True)
@click.pass_context
def cli(
    ctx,
    verbosity: str | None = DEFAULT_VERBOSITY,
    api_key: str | None = None,
    base_url: str | None = None,
    request_timeout: float | None = None,
) -> None:
    verbosity = verbosity or DEFAULT_VERBOSITY
    _LOGGER.setLevel(verbosity.upper())
    ctx.obj = {}
    possible_overrides = {
        CLIOverrideSetting.API_KEY.name: api_key,
        CLIOverrideSetting.BASE_URL.name: base_url,
        CLIOverrideSetting.REQUEST_TIMEOUT.name: request_timeout,
    }
    ctx.obj[_GROUP_PARAMS_KEY] = {k: v for k, v in possible_overrides.items() if v is not None}


@cli.command(help="List the available Echo Nest operations.", short_help="List the available operations.")
def operations() -> None:
    table = Table(title="Echo Nest operations")
    table.add_column("operation")
    table.add_column("verb")
    table.add_column("path")
    table.add_column("returns")
    for name in sorted(ENDPOINT_TABLE.keys()):
        endpoint = ENDPOINT_TABLE[name]
        returns = f"list[{endpoint.entity_shape.__name__}]" if endpoint.returns_many else endpoint.entity_shape.__name__
        table.add_row(name, endpoint.verb.value, endpoint.path, returns)
    CONSOLE.print(table)


@cli.command(
    help="Run a single Echo Nest operation and print the resulting entities as JSON. "
    "Pass request params with repeated -o key=value args, i.e. `echonest call artist_profile -o name=Weezer`.",
    short_help="Run a single Echo Nest operation.",
)
@config_path_option
@click.argument("operation", type=click.STRING)
@click.option(
    "-o",
    "--option",
    "raw_options",
    multiple=True,
    envvar=None,
    help="A request param as key=value. Repeat a key to send multiple values.",
)
@click.pass_context
def call(ctx, config: str | None, operation: str, raw_options: tuple[str, ...]) -> None:
    options = parse_option_pairs(raw_options)
    app_settings = _load_settings(ctx, config)
    with EchonestAPIClient(app_settings=app_settings) as client:
        try:
            result = EchonestFacade(client=client).call(operation, options)
        except UnknownOperationError as uoe:
            raise click.BadParameter(uoe.args[0], param_hint="OPERATION") from uoe
        except EchonestClientException as ece:
            raise click.ClickException(f"{ece.__class__.__name__}: {ece}") from ece
    click.echo(json.dumps(_to_jsonable(result), indent=2))


@cli.command(help="Print the resolved echonest config settings, with the api key redacted.", short_help="Show config.")
@config_path_option
@click.pass_context
def conf(ctx, config: str | None) -> None:
    _load_settings(ctx, config).pretty_print_config()


@cli.command(
    name="init-conf", help="Print a template config.yaml to stdout.", short_help="Print a template config.yaml."
)
def init_conf() -> None:
    click.echo(load_init_config_template())


if __name__ == "__main__":
    cli()
