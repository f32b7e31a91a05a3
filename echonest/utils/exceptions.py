from typing import Any


class AppConfigException(Exception):
    """Exception for invalid configuration errors."""

    pass


class EchonestClientException(Exception):
    """Base exception for failed calls to the Echo Nest API."""

    pass


class TransportError(EchonestClientException):
    """Exception for requests which could not complete (timeouts, connection failures, unparseable bodies)."""

    pass


class UpstreamStatusException(EchonestClientException):
    """
    Base exception for responses which the Echo Nest API answered with a non-success status.
    The upstream message is kept verbatim on the `message` attribute.
    """

    def __init__(self, message: str, status_code: int | None = None, http_status: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.http_status = http_status


class AuthenticationError(UpstreamStatusException):
    """Exception for responses reporting a missing, invalid or unauthorized api key."""

    pass


class ServiceError(UpstreamStatusException):
    """Exception for any other non-zero envelope status code reported by the Echo Nest API."""

    pass


class MappingError(EchonestClientException):
    """Exception for decoded payloads whose shape does not match the expected entity shape."""

    pass


class UnknownOperationError(KeyError):
    """Exception raised when a facade operation name is not in the endpoint table."""

    def __init__(self, operation: str, valid_operations: Any):
        self.operation = operation
        super().__init__(f"Unknown operation: '{operation}'. Valid operations are: {sorted(valid_operations)}")
