import json
from typing import Any
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner
from pytest_httpx import HTTPXMock

from echonest.cli import cli
from echonest.utils.cli_utils import parse_option_pairs
from tests.conftest import FAKE_API_KEY, WEEZER_ARTIST_ID


@pytest.fixture(scope="function")
def mock_logger_set_level() -> MagicMock:
    with patch("echonest.cli._LOGGER.setLevel") as mock_logger_set_level:
        mock_logger_set_level.return_value = None
        yield mock_logger_set_level


def test_cli_help_command() -> None:
    cli_runner = CliRunner()
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0, f"Expected cli command with --help flag to pass, but errored: {result.exception}"


def test_cli_operations_command() -> None:
    cli_runner = CliRunner()
    result = cli_runner.invoke(cli, ["operations"])
    assert result.exit_code == 0, f"Expected cli command 'operations' to pass but errored: {result.exception}"
    assert "artist_profile" in result.output
    assert "artist_biographies" in result.output


@pytest.mark.parametrize("verbosity", ["DEBUG", "INFO", "WARNING", "ERROR"])
def test_cli_call_command(
    httpx_mock: HTTPXMock,
    mock_logger_set_level: MagicMock,
    minimal_artist_profile_json: dict[str, Any],
    verbosity: str,
) -> None:
    httpx_mock.add_response(json=minimal_artist_profile_json)
    cli_runner = CliRunner()
    cmd = ["--verbosity", verbosity, "--api-key", FAKE_API_KEY, "call", "artist_profile", "-o", f"id={WEEZER_ARTIST_ID}"]
    result = cli_runner.invoke(cli, cmd)
    assert result.exit_code == 0, f"Expected cli command 'call' to pass but errored: {result.exception}"
    mock_logger_set_level.assert_called_once_with(verbosity)
    assert json.loads(result.stdout) == {"id": WEEZER_ARTIST_ID, "name": "Weezer"}
    request = httpx_mock.get_request()
    assert request.url.params["id"] == WEEZER_ARTIST_ID
    assert request.url.params["api_key"] == FAKE_API_KEY


def test_cli_call_list_result(httpx_mock: HTTPXMock, mock_artist_search_json: dict[str, Any]) -> None:
    httpx_mock.add_response(json=mock_artist_search_json)
    cli_runner = CliRunner()
    cmd = ["call", "artist_search", "-o", "name=weezer", "-o", "bucket=songs", "-o", "bucket=terms"]
    result = cli_runner.invoke(cli, cmd, env={"ECHONEST_API_KEY": FAKE_API_KEY})
    assert result.exit_code == 0, f"Expected cli command 'call' to pass but errored: {result.exception}"
    assert [artist["name"] for artist in json.loads(result.stdout)] == ["Weezer", "Rivers Cuomo", "The Rentals"]
    assert httpx_mock.get_request().url.params.get_list("bucket") == ["songs", "terms"]


def test_cli_call_auth_error(httpx_mock: HTTPXMock, mock_invalid_api_key_json: dict[str, Any]) -> None:
    httpx_mock.add_response(json=mock_invalid_api_key_json)
    cli_runner = CliRunner()
    result = cli_runner.invoke(cli, ["--api-key", "bad-key", "call", "artist_profile", "-o", "name=Weezer"])
    assert result.exit_code == 1
    assert "AuthenticationError: Invalid API key" in result.output


def test_cli_call_unknown_operation(httpx_mock: HTTPXMock) -> None:
    cli_runner = CliRunner()
    result = cli_runner.invoke(cli, ["--api-key", FAKE_API_KEY, "call", "artist_fake"])
    assert result.exit_code == 2
    assert "Unknown operation: 'artist_fake'" in result.output
    assert not httpx_mock.get_requests()


def test_cli_call_bad_option_pair() -> None:
    cli_runner = CliRunner()
    result = cli_runner.invoke(cli, ["--api-key", FAKE_API_KEY, "call", "artist_profile", "-o", "Weezer"])
    assert result.exit_code == 2
    assert "key=value" in result.output


def test_cli_call_missing_api_key() -> None:
    cli_runner = CliRunner()
    result = cli_runner.invoke(cli, ["call", "artist_profile", "-o", "name=Weezer"])
    assert result.exit_code == 1
    assert "Invalid echonest config settings" in result.output


def test_cli_conf_command(tmp_path) -> None:
    config_filepath = tmp_path / "config.yaml"
    config_filepath.write_text(f"api_key: {FAKE_API_KEY}\nrequest_timeout_seconds: 15\n")
    cli_runner = CliRunner()
    result = cli_runner.invoke(cli, ["conf", "--config", str(config_filepath)])
    assert result.exit_code == 0, f"Expected cli command 'conf' to pass but errored: {result.exception}"
    assert FAKE_API_KEY not in result.output
    assert "request_timeout_seconds: 15" in result.output


def test_cli_init_conf_command() -> None:
    cli_runner = CliRunner()
    result = cli_runner.invoke(cli, ["init-conf"])
    assert result.exit_code == 0
    assert "api_key:" in result.output


@pytest.mark.parametrize(
    "raw_pairs, expected",
    [
        ((), {}),
        (("name=Weezer",), {"name": "Weezer"}),
        (("text=a=b",), {"text": "a=b"}),
        (("name=",), {"name": ""}),
        (("bucket=songs", "bucket=terms", "bucket=urls"), {"bucket": ["songs", "terms", "urls"]}),
    ],
)
def test_parse_option_pairs(raw_pairs: tuple[str, ...], expected: dict[str, Any]) -> None:
    assert parse_option_pairs(raw_pairs) == expected
