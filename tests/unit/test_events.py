"""Unit tests for UIEvent and UIResponse protocol types."""

import json

import pytest
from pydantic import ValidationError

from web_ui.protocol.events import MAX_CORRELATION_TOKEN, UIEvent, binding_key
from web_ui.protocol.responses import UIResponse


class TestBindingKey:
    """Test binding key construction."""

    def test_joins_with_separator(self):
        assert binding_key("submit-button", "click") == "submit-button:click"

    @pytest.mark.parametrize(("element_id", "event_type"), [("a:b", "click"), ("btn", "x:y")])
    def test_rejects_separator_in_parts(self, element_id, event_type):
        with pytest.raises(ValueError):
            binding_key(element_id, event_type)


class TestUIEvent:
    """Test UIEvent decoding."""

    def test_from_json_full(self):
        event = UIEvent.from_json(
            json.dumps(
                {
                    "element_id": "submit-button",
                    "event_type": "click",
                    "data": {"value": "Submit"},
                    "correlation_token": 123,
                }
            )
        )

        assert event.element_id == "submit-button"
        assert event.event_type == "click"
        assert event.data == {"value": "Submit"}
        assert event.correlation_token == 123
        assert event.key == "submit-button:click"

    def test_optional_fields_default_to_none(self):
        event = UIEvent.from_json('{"element_id": "btn", "event_type": "click"}')

        assert event.data is None
        assert event.correlation_token is None

    def test_absent_data_matches_explicit_null(self):
        absent = UIEvent.from_json('{"element_id": "btn", "event_type": "click"}')
        explicit = UIEvent.from_json('{"element_id": "btn", "event_type": "click", "data": null}')

        assert absent == explicit

    def test_accepts_request_id_alias(self):
        """The original browser client sends request_id."""
        event = UIEvent.from_json(
            '{"element_id": "btn", "event_type": "click", "data": {}, "request_id": 9}'
        )

        assert event.correlation_token == 9

    def test_data_can_be_any_json(self):
        event = UIEvent.from_json('{"element_id": "b", "event_type": "e", "data": [1, "x", null]}')

        assert event.data == [1, "x", None]

    def test_is_immutable(self):
        event = UIEvent(element_id="btn", event_type="click")

        with pytest.raises(ValidationError):
            event.element_id = "other"

    @pytest.mark.parametrize(
        "payload",
        [
            "not json",
            "[]",
            '{"event_type": "click"}',
            '{"element_id": "btn"}',
            '{"element_id": 1, "event_type": "click"}',
            '{"element_id": "b", "event_type": "c", "correlation_token": -1}',
            '{"element_id": "b", "event_type": "c", "correlation_token": "abc"}',
        ],
    )
    def test_rejects_malformed(self, payload):
        with pytest.raises(ValidationError):
            UIEvent.from_json(payload)

    def test_token_upper_bound(self):
        UIEvent(element_id="b", event_type="c", correlation_token=MAX_CORRELATION_TOKEN)

        with pytest.raises(ValidationError):
            UIEvent(element_id="b", event_type="c", correlation_token=MAX_CORRELATION_TOKEN + 1)


class TestUIResponse:
    """Test UIResponse construction and wire form."""

    def test_ok_factory(self):
        response = UIResponse.ok("saved", {"id": 42})

        assert response.succeeded is True
        assert response.message == "saved"
        assert response.payload == {"id": 42}
        assert response.correlation_token is None

    def test_failure_factory(self):
        response = UIResponse.failure("broken", correlation_token=3)

        assert response.succeeded is False
        assert response.message == "broken"
        assert response.payload is None
        assert response.correlation_token == 3

    def test_wire_form_omits_absent_fields(self):
        data = json.loads(UIResponse(succeeded=True).to_json())

        assert data == {"succeeded": True}

    def test_wire_form_full(self):
        response = UIResponse(succeeded=True, message="ok", payload={"n": 1}, correlation_token=7)

        assert json.loads(response.to_json()) == {
            "succeeded": True,
            "message": "ok",
            "payload": {"n": 1},
            "correlation_token": 7,
        }

    def test_payload_nested_nulls_are_kept(self):
        response = UIResponse.ok(payload={"a": None})

        assert json.loads(response.to_json())["payload"] == {"a": None}

    def test_with_token_copies(self):
        original = UIResponse.ok("x")
        copy = original.with_token(5)

        assert copy.correlation_token == 5
        assert original.correlation_token is None
        assert copy.with_token(None).correlation_token is None
