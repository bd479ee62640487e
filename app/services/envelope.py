"""
Response envelope translation

The downstream service wraps every reply as

    {"response": <payload or null>, "errorMessage": <error or null>}

This module turns a completed downstream exchange (status code + body) into
exactly one of three outcomes:

    Success(payload)          the call succeeded and the payload decoded
    Failure(error, status)    the downstream rejected the operation
    TransportError(reason)    the call could not be completed or understood

Translation is pure: no I/O, no logging, and the same input always yields
an equal outcome.
"""

import json
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Dict, Generic, Optional, Type, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from app.models.common import ErrorMessage

T = TypeVar("T")

RESPONSE_FIELD = "response"
ERROR_FIELD = "errorMessage"

# Payload type for add, update and delete: any non-null response is accepted
Acknowledged = Any


class TransportErrorReason(str, Enum):
    """Why a downstream call produced no usable outcome"""
    UNREACHABLE = "unreachable"
    TIMEOUT = "timeout"
    MALFORMED_BODY = "malformed_body"
    MALFORMED_ENVELOPE = "malformed_envelope"
    SCHEMA_MISMATCH = "schema_mismatch"
    UNEXPECTED_STATUS = "unexpected_status"


@dataclass(frozen=True)
class Success(Generic[T]):
    payload: T


@dataclass(frozen=True)
class Failure:
    error: ErrorMessage
    status_code: int


@dataclass(frozen=True)
class TransportError:
    reason: TransportErrorReason
    detail: str
    status_code: Optional[int] = None


TransportOutcome = Union[Success[T], Failure, TransportError]


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code < 300


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or repr(tp)


def _parse_envelope(body: Union[bytes, str, None]) -> Optional[Dict[str, Any]]:
    """Parse the raw body; None if it is not a JSON object"""
    if body is None:
        return None
    try:
        data = json.loads(body)
    except (ValueError, RecursionError):
        return None
    if not isinstance(data, dict):
        return None
    return data


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
    return f"{location}: {first.get('msg', 'invalid value')}"


class EnvelopeTranslator(Generic[T]):
    """
    Translator bound to one payload type and one error type

    Args:
        payload_type: Anything pydantic can validate: a model,
            PagedResponse[Model], List[Model], int, or Any for
            acknowledgement-only operations
        error_type: Model for the errorMessage field
    """

    def __init__(self, payload_type: Any, error_type: Type[Any] = ErrorMessage):
        self.payload_type = payload_type
        self.error_type = error_type
        self._payload_adapter = TypeAdapter(payload_type)
        self._error_adapter = TypeAdapter(error_type)

    def translate(self, status_code: int, body: Union[bytes, str, None]) -> TransportOutcome:
        envelope = _parse_envelope(body)
        if is_success_status(status_code):
            return self._translate_success(status_code, envelope)
        return self._translate_failure(status_code, envelope)

    def _translate_success(self, status_code: int, envelope: Optional[Dict[str, Any]]) -> TransportOutcome:
        if envelope is None:
            return TransportError(
                TransportErrorReason.MALFORMED_BODY,
                "downstream body is not a JSON object",
                status_code,
            )

        response = envelope.get(RESPONSE_FIELD)
        error = envelope.get(ERROR_FIELD)

        if response is not None and error is not None:
            return TransportError(
                TransportErrorReason.MALFORMED_ENVELOPE,
                "envelope carries both response and errorMessage",
                status_code,
            )

        if response is not None:
            try:
                payload = self._payload_adapter.validate_python(response)
            except ValidationError as e:
                return TransportError(
                    TransportErrorReason.SCHEMA_MISMATCH,
                    f"response is not a valid {_type_name(self.payload_type)} ({_first_error(e)})",
                    status_code,
                )
            return Success(payload)

        if error is not None:
            return self._decode_failure(status_code, error)

        return TransportError(
            TransportErrorReason.MALFORMED_ENVELOPE,
            "envelope carries neither response nor errorMessage",
            status_code,
        )

    def _translate_failure(self, status_code: int, envelope: Optional[Dict[str, Any]]) -> TransportOutcome:
        error = envelope.get(ERROR_FIELD) if envelope is not None else None
        if error is None:
            return TransportError(
                TransportErrorReason.UNEXPECTED_STATUS,
                f"downstream returned {status_code} without an errorMessage",
                status_code,
            )
        return self._decode_failure(status_code, error)

    def _decode_failure(self, status_code: int, error: Any) -> TransportOutcome:
        try:
            decoded = self._error_adapter.validate_python(error)
        except ValidationError as e:
            return TransportError(
                TransportErrorReason.SCHEMA_MISMATCH,
                f"errorMessage is not a valid {_type_name(self.error_type)} ({_first_error(e)})",
                status_code,
            )
        return Failure(decoded, status_code)


@lru_cache(maxsize=None)
def get_translator(payload_type: Any, error_type: Type[Any] = ErrorMessage) -> EnvelopeTranslator:
    """Translators are cached per (payload_type, error_type)"""
    return EnvelopeTranslator(payload_type, error_type)


def translate(
    status_code: int,
    body: Union[bytes, str, None],
    payload_type: Any,
    error_type: Type[Any] = ErrorMessage
) -> TransportOutcome:
    """Translate one downstream exchange into a TransportOutcome"""
    return get_translator(payload_type, error_type).translate(status_code, body)
