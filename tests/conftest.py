import json
import os
from collections.abc import Generator
from typing import Any

import pytest

from echonest.config.app_settings import AppSettings
from echonest.endpoints.facade import EchonestFacade
from echonest.utils.httpx_utils.echonest_client import EchonestAPIClient

TEST_DIR_ABS_PATH = os.path.dirname(os.path.abspath(__file__))
PROJECT_ABS_PATH = os.path.dirname(TEST_DIR_ABS_PATH)
ROOT_MODULE_ABS_PATH = os.path.join(PROJECT_ABS_PATH, "echonest")

MOCK_RESOURCES_DIR_PATH = os.path.join(TEST_DIR_ABS_PATH, "resources")
MOCK_JSON_RESPONSES_DIR_PATH = os.path.join(MOCK_RESOURCES_DIR_PATH, "mock_api_responses")
_ARTIST_PROFILE_JSON_FILEPATH = os.path.join(MOCK_JSON_RESPONSES_DIR_PATH, "artist_profile_response.json")
_ARTIST_BIOGRAPHIES_JSON_FILEPATH = os.path.join(MOCK_JSON_RESPONSES_DIR_PATH, "artist_biographies_response.json")
_ARTIST_LIST_TERMS_JSON_FILEPATH = os.path.join(MOCK_JSON_RESPONSES_DIR_PATH, "artist_list_terms_response.json")
_ARTIST_SEARCH_JSON_FILEPATH = os.path.join(MOCK_JSON_RESPONSES_DIR_PATH, "artist_search_response.json")
_INVALID_API_KEY_JSON_FILEPATH = os.path.join(MOCK_JSON_RESPONSES_DIR_PATH, "invalid_api_key_response.json")

FAKE_API_KEY = "fake-echonest-api-key"
WEEZER_ARTIST_ID = "ARH6W4X1187B99274F"


def pytest_collection_modifyitems(config, items):
    for item in items:
        # https://pypi.org/project/pytest-httpx/#for-the-whole-test-suite
        item.add_marker(pytest.mark.httpx_mock(assert_all_responses_were_requested=False))


def load_mock_response_json(json_filepath: str) -> dict[str, Any]:
    """Utility function to load and return the mock API json blob located at the specified json_filepath."""
    with open(json_filepath) as f:
        json_data = json.load(f)
    return json_data


@pytest.fixture(autouse=True)
def clear_echonest_env_vars(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keeps any ECHONEST_* env vars on the host from leaking into the settings under test."""
    for env_var in list(os.environ.keys()):
        if env_var.startswith("ECHONEST_"):
            monkeypatch.delenv(env_var)


@pytest.fixture(scope="function")
def valid_app_settings() -> AppSettings:
    return AppSettings(api_key=FAKE_API_KEY)


@pytest.fixture(scope="function")
def echonest_client(valid_app_settings: AppSettings) -> Generator[EchonestAPIClient, None, None]:
    client = EchonestAPIClient(app_settings=valid_app_settings)
    yield client
    client.close_client()


@pytest.fixture(scope="function")
def echonest_facade(echonest_client: EchonestAPIClient) -> EchonestFacade:
    return EchonestFacade(client=echonest_client)


@pytest.fixture(scope="session")
def mock_artist_profile_json() -> dict[str, Any]:
    return load_mock_response_json(_ARTIST_PROFILE_JSON_FILEPATH)


@pytest.fixture(scope="session")
def mock_artist_biographies_json() -> dict[str, Any]:
    return load_mock_response_json(_ARTIST_BIOGRAPHIES_JSON_FILEPATH)


@pytest.fixture(scope="session")
def mock_artist_list_terms_json() -> dict[str, Any]:
    return load_mock_response_json(_ARTIST_LIST_TERMS_JSON_FILEPATH)


@pytest.fixture(scope="session")
def mock_artist_search_json() -> dict[str, Any]:
    return load_mock_response_json(_ARTIST_SEARCH_JSON_FILEPATH)


@pytest.fixture(scope="session")
def mock_invalid_api_key_json() -> dict[str, Any]:
    return load_mock_response_json(_INVALID_API_KEY_JSON_FILEPATH)


@pytest.fixture(scope="session")
def minimal_artist_profile_json() -> dict[str, Any]:
    return {"response": {"status": {"code": 0}, "artist": {"id": WEEZER_ARTIST_ID, "name": "Weezer"}}}
