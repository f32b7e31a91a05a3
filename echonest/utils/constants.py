from typing import Final

ECHONEST_API_BASE_URL: Final[str] = "https://developer.echonest.com"
ECHONEST_API_PATH_PREFIX: Final[str] = "/api/v4/"
ECHONEST_API_VERSION: Final[str] = "4"
ECHONEST_OUTPUT_FORMAT: Final[str] = "json"

# Envelope layout: {"response": {"status": {"code": int, "message": str}, "<payload key>": ...}}
ENVELOPE_RESPONSE_KEY: Final[str] = "response"
ENVELOPE_STATUS_KEY: Final[str] = "status"
ENVELOPE_STATUS_CODE_KEY: Final[str] = "code"
ENVELOPE_STATUS_MESSAGE_KEY: Final[str] = "message"

PARAM_API_KEY: Final[str] = "api_key"
PARAM_FORMAT: Final[str] = "format"
PARAM_VERSION: Final[str] = "version"

STATUS_CODE_SUCCESS: Final[int] = 0
# 1: missing / invalid key, 2: key not allowed to call the method, 5: invalid key parameter
AUTHENTICATION_STATUS_CODES: Final[frozenset[int]] = frozenset([1, 2, 5])
AUTHENTICATION_HTTP_STATUSES: Final[frozenset[int]] = frozenset([401, 403])

ENV_PREFIX: Final[str] = "ECHONEST_"
