"""
Contains a few helper decorators / functions to reduce the repeated code in cli.py.
"""

from functools import wraps

import click

DEFAULT_VERBOSITY = "WARNING"


# Adopted from here to reduce repeat code: https://github.com/pallets/click/issues/108#issuecomment-280489786
def config_path_option(func):
    @click.option(
        "-c",
        "--config",
        required=False,
        default=None,
        envvar="ECHONEST_CONFIG",
        show_envvar=True,
        type=click.Path(exists=True, dir_okay=False),
        help="Path to an optional echonest config.yaml file. Settings may also come from ECHONEST_* env vars.",
    )
    @wraps(func)
    def wrapper(*args, **kwargs):
        return func(*args, **kwargs)

    return wrapper


def parse_option_pairs(raw_pairs: tuple[str, ...]) -> dict[str, str | list[str]]:
    """
    Turns repeated `key=value` CLI args into an options mapping.
    Keys given more than once become multi-valued options, i.e. `-o bucket=songs -o bucket=terms`.
    """
    options: dict[str, str | list[str]] = {}
    for raw_pair in raw_pairs:
        key, sep, value = raw_pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"Expected an option of the form key=value, got: '{raw_pair}'")
        if key not in options:
            options[key] = value
        elif isinstance(options[key], list):
            options[key].append(value)  # type: ignore[union-attr]
        else:
            options[key] = [options[key], value]  # type: ignore[list-item]
    return options
