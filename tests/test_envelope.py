"""
Tests for response envelope translation
"""

import json
from typing import Any, List
from uuid import UUID

import pytest

from app.models.common import ErrorMessage, PagedResponse
from app.models.like import LikeDTO
from app.models.user import UserDTO
from app.services.envelope import (
    Acknowledged,
    EnvelopeTranslator,
    Failure,
    Success,
    TransportError,
    TransportErrorReason,
    get_translator,
    translate,
)

ANN_ID = "11111111-1111-1111-1111-111111111111"


def envelope(response: Any = None, error: Any = None) -> bytes:
    return json.dumps({"response": response, "errorMessage": error}).encode()


class TestSuccessfulStatus:
    """2xx responses"""

    def test_get_by_id_success(self):
        body = envelope({"id": ANN_ID, "name": "Ann"})

        outcome = translate(200, body, UserDTO)

        assert isinstance(outcome, Success)
        assert outcome.payload.id == UUID(ANN_ID)
        assert outcome.payload.name == "Ann"

    def test_payload_round_trips(self):
        user = UserDTO(id=UUID(ANN_ID), name="Ann", email="ann@example.com", phone_number="0700")
        body = envelope(user.model_dump(mode="json", by_alias=True))

        outcome = translate(200, body, UserDTO)

        assert outcome == Success(user)

    def test_page_preserves_order(self):
        first, second = "22222222-2222-2222-2222-222222222222", "33333333-3333-3333-3333-333333333333"
        body = envelope({
            "page": 1,
            "pageSize": 10,
            "totalCount": 2,
            "data": [{"id": first, "name": "A"}, {"id": second, "name": "B"}],
        })

        outcome = translate(200, body, PagedResponse[UserDTO])

        assert isinstance(outcome, Success)
        page = outcome.payload
        assert (page.page, page.page_size, page.total_count) == (1, 10, 2)
        assert [u.name for u in page.data] == ["A", "B"]
        assert [str(u.id) for u in page.data] == [first, second]

    def test_scalar_count(self):
        assert translate(200, envelope(7), int) == Success(7)

    def test_zero_count_is_a_payload(self):
        # 0 is a value, not an absent response
        assert translate(200, envelope(0), int) == Success(0)

    def test_list_payload(self):
        likes = [
            {"id": ANN_ID, "userId": ANN_ID, "postId": ANN_ID},
        ]
        outcome = translate(200, envelope(likes), List[LikeDTO])

        assert isinstance(outcome, Success)
        assert len(outcome.payload) == 1
        assert outcome.payload[0].post_id == UUID(ANN_ID)

    def test_empty_object_acknowledges(self):
        assert translate(200, envelope({}), Acknowledged) == Success({})

    def test_pascal_case_keys_decode(self):
        outcome = translate(200, envelope({"Id": ANN_ID, "Name": "Ann", "PhoneNumber": "0700"}), UserDTO)

        assert isinstance(outcome, Success)
        assert outcome.payload.phone_number == "0700"
        assert outcome.payload.model_extra == {}
        assert outcome.payload.to_wire()["phoneNumber"] == "0700"

    def test_unknown_fields_are_kept(self):
        outcome = translate(200, envelope({"id": ANN_ID, "name": "Ann", "avatar": "a.png"}), UserDTO)

        assert isinstance(outcome, Success)
        assert outcome.payload.model_dump(by_alias=True)["avatar"] == "a.png"

    def test_error_in_success_status_is_failure(self):
        outcome = translate(200, envelope(error={"message": "Email already used"}), Any)

        assert outcome == Failure(ErrorMessage(message="Email already used"), 200)

    def test_error_round_trips(self):
        error = ErrorMessage(message="Forbidden", code="CannotDelete", status="Forbidden")
        body = envelope(error=error.model_dump(mode="json", by_alias=True))

        outcome = translate(200, body, UserDTO)

        assert isinstance(outcome, Failure)
        assert outcome.error == error

    @pytest.mark.parametrize("body", [
        b"not json", b"", b"[1, 2]", b"42", b"\xff\xfe",
        b"[" * 100000 + b"]" * 100000,
    ])
    def test_unparsable_body_is_transport_error(self, body):
        outcome = translate(200, body, UserDTO)

        assert isinstance(outcome, TransportError)
        assert outcome.reason == TransportErrorReason.MALFORMED_BODY
        assert outcome.status_code == 200

    def test_none_body_is_transport_error(self):
        outcome = translate(204, None, Any)

        assert isinstance(outcome, TransportError)
        assert outcome.reason == TransportErrorReason.MALFORMED_BODY

    def test_neither_field_is_malformed_envelope(self):
        for body in (envelope(), b"{}"):
            outcome = translate(200, body, UserDTO)

            assert isinstance(outcome, TransportError)
            assert outcome.reason == TransportErrorReason.MALFORMED_ENVELOPE

    def test_both_fields_is_malformed_envelope(self):
        outcome = translate(200, envelope({"id": ANN_ID, "name": "Ann"}, {"message": "x"}), UserDTO)

        assert isinstance(outcome, TransportError)
        assert outcome.reason == TransportErrorReason.MALFORMED_ENVELOPE

    def test_payload_schema_mismatch(self):
        outcome = translate(200, envelope({"id": "not-a-uuid", "name": "Ann"}), UserDTO)

        assert isinstance(outcome, TransportError)
        assert outcome.reason == TransportErrorReason.SCHEMA_MISMATCH
        assert "UserDTO" in outcome.detail

    def test_error_schema_mismatch(self):
        outcome = translate(200, envelope(error="just a string"), UserDTO)

        assert isinstance(outcome, TransportError)
        assert outcome.reason == TransportErrorReason.SCHEMA_MISMATCH


class TestFailedStatus:
    """non-2xx responses"""

    def test_not_found(self):
        outcome = translate(404, envelope(error={"message": "User not found"}), UserDTO)

        assert isinstance(outcome, Failure)
        assert outcome.error.message == "User not found"
        assert outcome.status_code == 404

    def test_never_success_even_with_response(self):
        outcome = translate(500, envelope({"id": ANN_ID, "name": "Ann"}), UserDTO)

        assert not isinstance(outcome, Success)
        assert isinstance(outcome, TransportError)
        assert outcome.reason == TransportErrorReason.UNEXPECTED_STATUS
        assert outcome.status_code == 500

    @pytest.mark.parametrize("body", [b"<html>Bad Gateway</html>", b"", None, b"{}"])
    def test_status_is_kept_without_envelope(self, body):
        outcome = translate(503, body, UserDTO)

        assert isinstance(outcome, TransportError)
        assert outcome.reason == TransportErrorReason.UNEXPECTED_STATUS
        assert outcome.status_code == 503

    @pytest.mark.parametrize("status_code", [301, 400, 401, 403, 404, 409, 500, 502])
    def test_no_success_for_any_error_status(self, status_code):
        for body in (envelope({}), envelope(7), envelope(error={"message": "no"}), b"garbage"):
            assert not isinstance(translate(status_code, body, Any), Success)


class TestTranslatorProperties:

    @pytest.mark.parametrize("status_code, body", [
        (200, envelope({"id": ANN_ID, "name": "Ann"})),
        (404, envelope(error={"message": "User not found"})),
        (200, b"nope"),
        (500, b""),
    ])
    def test_idempotent(self, status_code, body):
        assert translate(status_code, body, UserDTO) == translate(status_code, body, UserDTO)

    def test_accepts_text_body(self):
        outcome = translate(200, envelope(3).decode(), int)
        assert outcome == Success(3)

    def test_translators_are_cached_per_type(self):
        assert get_translator(UserDTO) is get_translator(UserDTO)
        assert get_translator(UserDTO) is not get_translator(LikeDTO)

    def test_custom_error_type(self):
        class DetailedError(ErrorMessage):
            field: str

        translator = EnvelopeTranslator(UserDTO, DetailedError)
        outcome = translator.translate(422, envelope(error={"message": "bad", "field": "email"}))

        assert isinstance(outcome, Failure)
        assert isinstance(outcome.error, DetailedError)
        assert outcome.error.field == "email"
