"""
Outcome to HTTP response mapping

Success payloads are returned to the route; non-success outcomes are raised
as exceptions and rendered by the handlers registered in app.main.
"""

from typing import Any, Dict

import structlog
from fastapi import Request, status
from fastapi.responses import JSONResponse

from app.models.common import Acknowledgement, ErrorMessage
from app.services.envelope import (
    Failure,
    Success,
    TransportError,
    TransportErrorReason,
    TransportOutcome,
)

logger = structlog.get_logger(__name__)


class DownstreamFailure(Exception):
    """The downstream service rejected the operation"""

    def __init__(self, failure: Failure):
        super().__init__(failure.error.message)
        self.failure = failure


class DownstreamUnavailable(Exception):
    """The downstream call could not be completed or understood"""

    def __init__(self, error: TransportError):
        super().__init__(error.detail)
        self.error = error


def unwrap(outcome: TransportOutcome) -> Any:
    """Return the success payload or raise the matching exception"""
    if isinstance(outcome, Success):
        return outcome.payload
    if isinstance(outcome, Failure):
        raise DownstreamFailure(outcome)
    if isinstance(outcome, TransportError):
        raise DownstreamUnavailable(outcome)
    raise TypeError(f"Unknown outcome {outcome!r}")


def acknowledge(outcome: TransportOutcome, message: str) -> Acknowledgement:
    """Replace the downstream's unit payload with an acknowledgement"""
    unwrap(outcome)
    return Acknowledgement(message=message)


def failure_status(failure: Failure) -> int:
    """Downstream status when it was an error status, else 400"""
    if failure.status_code >= 400:
        return failure.status_code
    return status.HTTP_400_BAD_REQUEST


def error_body(error: ErrorMessage) -> Dict[str, Any]:
    """The downstream error as received: no defaults added, extra fields kept"""
    body = error.model_dump(mode="json", by_alias=True, exclude_unset=True)
    body.update(error.model_extra or {})
    return body


def transport_status(error: TransportError) -> int:
    if error.reason == TransportErrorReason.TIMEOUT:
        return status.HTTP_504_GATEWAY_TIMEOUT
    return status.HTTP_502_BAD_GATEWAY


_TRANSPORT_MESSAGES = {
    TransportErrorReason.UNREACHABLE: "The downstream service could not be reached",
    TransportErrorReason.TIMEOUT: "The downstream service did not respond in time",
}
_DEFAULT_TRANSPORT_MESSAGE = "The downstream service returned a response that could not be understood"


def transport_body(error: TransportError) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "error": "Gateway timeout" if error.reason == TransportErrorReason.TIMEOUT else "Bad gateway",
        "message": _TRANSPORT_MESSAGES.get(error.reason, _DEFAULT_TRANSPORT_MESSAGE),
        "reason": error.reason.value,
    }
    if error.status_code is not None:
        body["upstreamStatus"] = error.status_code
    return body


async def downstream_failure_handler(request: Request, exc: DownstreamFailure) -> JSONResponse:
    failure = exc.failure
    logger.warning(
        "Downstream rejected request",
        method=request.method,
        path=request.url.path,
        upstream_status=failure.status_code,
        error_message=failure.error.message,
    )
    return JSONResponse(
        status_code=failure_status(failure),
        content=error_body(failure.error),
    )


async def downstream_unavailable_handler(request: Request, exc: DownstreamUnavailable) -> JSONResponse:
    error = exc.error
    logger.error(
        "Downstream call unusable",
        method=request.method,
        path=request.url.path,
        reason=error.reason.value,
        detail=error.detail,
        upstream_status=error.status_code,
    )
    return JSONResponse(status_code=transport_status(error), content=transport_body(error))


# OpenAPI documentation for the non-success outcomes of every resource route
ERROR_RESPONSES: Dict[int, Dict[str, Any]] = {
    400: {"model": ErrorMessage, "description": "Rejected by the downstream service"},
    401: {"description": "Missing or invalid bearer token"},
    404: {"model": ErrorMessage, "description": "Not found downstream"},
    502: {"description": "Downstream service unreachable or its reply was malformed"},
    504: {"description": "Downstream service timed out"},
}
