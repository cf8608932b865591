from typing import Optional

from llm_client.schemas.errors import ErrorDetail


class ClientError(Exception):
    """Base class for every failure raised intentionally by this library.

    Callers can catch this to handle any classified failure, or one of the
    subclasses below to react to a specific kind.
    """


class ValidationError(ClientError, ValueError):
    """Raised by a builder setter when an argument is outside its bound.

    Never reaches the network: the request is rejected before it is built.
    """


class EncodingFailure(ClientError):
    """Raised when a built request cannot be serialized.

    Indicates a bug: every request that passed builder validation must encode.
    """


class MalformedResponse(ClientError):
    """Raised when a success response body does not have the expected shape."""


class ApiError(ClientError):
    """Raised when the server rejected the request.

    Carries the HTTP status code and the server's structured error.
    """

    def __init__(self, status_code: int, error: ErrorDetail):
        super().__init__(f"{status_code}: {error.message}")
        self.status_code = status_code
        self.error = error

    @property
    def type(self) -> Optional[str]:
        return self.error.type

    @property
    def code(self) -> Optional[str]:
        return self.error.code


class TransportFailure(ClientError):
    """Raised when the transport could not complete the exchange.

    Connectivity problems, timeouts and interruptions all land here; the
    underlying exception is chained as ``__cause__``.
    """
