import logging
import time
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, Optional, TypeVar

from llm_client.auth import BearerAuth
from llm_client.codec import decode_error, decode_failure_body, parse_body
from llm_client.errors import ApiError, MalformedResponse, TransportFailure
from llm_client.log import log_call, request_logger
from llm_client.metrics import client_request_duration_seconds, client_requests_total
from llm_client.transport import Transport, TransportResponse

T = TypeVar("T")


class BaseClient:
    """Shared request pipeline for one API endpoint.

    Both the blocking and the async variant of every operation go through
    the same steps: auth headers, transport call, `_handle_response`, then
    the operation's decoder. A given reply is therefore classified the same
    way whichever variant received it.

    Subclasses set `endpoint` (used for metrics and logs) and expose the
    public operations.
    """

    endpoint = "base"

    def __init__(self, transport: Transport, auth: BearerAuth) -> None:
        self._transport = transport
        self._auth = auth

    def _headers(self, has_body: bool) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if has_body:
            headers["Content-Type"] = "application/json"
        headers.update(self._auth.headers())
        return headers

    @staticmethod
    def _handle_response(response: TransportResponse) -> Any:
        """Check the status and error envelope, returning the parsed body.

        A success status whose body still carries an ``error`` envelope is
        reported as `ApiError` with that status.
        """
        if not response.is_success:
            raise ApiError(
                response.status_code,
                decode_failure_body(response.status_code, response.body),
            )
        payload = parse_body(response.body)
        error = decode_error(payload)
        if error is not None:
            raise ApiError(response.status_code, error)
        return payload

    @contextmanager
    def _track(self, operation: str, method: str) -> Iterator[Dict[str, Any]]:
        start = time.perf_counter()
        call = {"status": "-"}
        # Stays "cancelled" for CancelledError / KeyboardInterrupt.
        outcome = "cancelled"
        try:
            yield call
            outcome = "success"
        except ApiError:
            outcome = "api_error"
            raise
        except MalformedResponse:
            outcome = "malformed"
            raise
        except TransportFailure:
            outcome = "transport_error"
            raise
        except Exception:
            outcome = "error"
            raise
        finally:
            duration = time.perf_counter() - start
            client_requests_total.labels(
                endpoint=self.endpoint, operation=operation, outcome=outcome
            ).inc()
            client_request_duration_seconds.labels(
                endpoint=self.endpoint, operation=operation, outcome=outcome
            ).observe(duration)
            log_call(
                self.endpoint, operation, method, outcome, call["status"], duration * 1000.0
            )

    def _debug(self, operation: str, method: str, path: str, body: Optional[bytes]) -> None:
        if request_logger.isEnabledFor(logging.DEBUG):
            request_logger.debug(
                "outgoing endpoint=%s operation=%s method=%s path=%s content_length=%s",
                self.endpoint,
                operation,
                method,
                path,
                len(body) if body is not None else 0,
            )

    def _execute(
        self,
        operation: str,
        method: str,
        path: str,
        decode: Callable[[Any], T],
        body: Optional[bytes] = None,
    ) -> T:
        self._debug(operation, method, path, body)
        with self._track(operation, method) as call:
            response = self._transport.send(
                method, path, body, self._headers(body is not None)
            )
            call["status"] = response.status_code
            return decode(self._handle_response(response))

    async def _aexecute(
        self,
        operation: str,
        method: str,
        path: str,
        decode: Callable[[Any], T],
        body: Optional[bytes] = None,
    ) -> T:
        self._debug(operation, method, path, body)
        with self._track(operation, method) as call:
            response = await self._transport.asend(
                method, path, body, self._headers(body is not None)
            )
            call["status"] = response.status_code
            return decode(self._handle_response(response))
