"""
Tests for serialization and deserialization of client model objects.

These tests ensure lossless JSON/YAML round-trip using the explicit
serialization functions in `clenum.serialization`, and that enum fields
follow the permissive wire contract.
"""

import json

import pytest

from clenum.model import AlertMessage, AlertMessageFrequency, AlertMessageResponse
from clenum.serialization import (
    alert_message_to_dict,
    alert_message_from_dict,
    alert_message_to_json,
    alert_message_from_json,
    alert_message_to_yaml,
    alert_message_from_yaml,
    alert_message_list_to_dicts,
    alert_message_list_from_dicts,
    response_to_dict,
    response_from_dict,
    response_to_json,
    response_from_json,
)


def build_sample_response() -> AlertMessageResponse:
    return AlertMessageResponse(
        status_code=200.0,
        message="OK",
        data=[
            AlertMessage("Maintenance tonight", AlertMessageFrequency.show_once()),
            AlertMessage("Please update", AlertMessageFrequency.show_everytime()),
            AlertMessage("No indicator"),
        ],
    )


def test_alert_message_wire_keys():
    message = AlertMessage("Hello", AlertMessageFrequency.show_once())
    assert alert_message_to_dict(message) == {
        "alertMessage": "Hello",
        "alertIndicator": "SHOW_ONCE",
    }


def test_alert_message_json_roundtrip():
    message = AlertMessage("Hello", AlertMessageFrequency.show_everytime())
    restored = alert_message_from_json(alert_message_to_json(message))
    assert restored.alert_message == "Hello"
    assert restored.alert_indicator is AlertMessageFrequency.show_everytime()


def test_alert_message_yaml_roundtrip():
    message = AlertMessage("Hello", AlertMessageFrequency.show_once())
    before = alert_message_to_dict(message)
    after = alert_message_to_dict(alert_message_from_yaml(alert_message_to_yaml(message)))
    assert before == after


def test_missing_and_null_fields_decode_to_none():
    assert alert_message_from_dict({}) == AlertMessage()
    restored = alert_message_from_json('{"alertMessage": null, "alertIndicator": null}')
    assert restored.alert_indicator is None
    assert alert_message_to_dict(restored) == {"alertMessage": None, "alertIndicator": None}


def test_unknown_indicator_is_preserved():
    """An indicator the client does not know should pass through unchanged."""
    raw = '{"alertMessage": "Digest", "alertIndicator": "SHOW_WEEKLY"}'
    restored = alert_message_from_json(raw)
    assert isinstance(restored.alert_indicator, AlertMessageFrequency)
    assert restored.alert_indicator is AlertMessageFrequency("SHOW_WEEKLY")
    assert json.loads(alert_message_to_json(restored)) == json.loads(raw)


def test_indicator_case_is_preserved():
    restored = alert_message_from_dict({"alertIndicator": "show_once"})
    assert restored.alert_indicator == AlertMessageFrequency.show_once()
    assert restored.alert_indicator is not AlertMessageFrequency.show_once()
    assert alert_message_to_dict(restored)["alertIndicator"] == "show_once"


def test_non_string_indicator_rejected():
    with pytest.raises(TypeError):
        alert_message_from_dict({"alertIndicator": 1})


@pytest.mark.parametrize("payload", [[], "text", 3, None])
def test_non_object_alert_message_rejected(payload):
    with pytest.raises(TypeError):
        alert_message_from_dict(payload)


def test_response_json_roundtrip():
    response = build_sample_response()
    before = response_to_dict(response, alert_message_list_to_dicts)
    json_str = response_to_json(response, data_serializer=alert_message_list_to_dicts)
    restored = response_from_json(json_str, data_parser=alert_message_list_from_dicts)
    after = response_to_dict(restored, alert_message_list_to_dicts)
    assert before == after
    assert restored.data[0].alert_indicator is AlertMessageFrequency.show_once()


def test_response_without_parser_keeps_raw_data():
    restored = response_from_json('{"statusCode": 403, "message": "Forbidden", "data": {"k": 1}}')
    assert restored.status_code == 403.0
    assert isinstance(restored.status_code, float)
    assert restored.message == "Forbidden"
    assert restored.data == {"k": 1}


def test_response_single_object_payload():
    d = {"statusCode": 200, "data": {"alertMessage": "Hi", "alertIndicator": "SHOW_ONCE"}}
    restored = response_from_dict(d, data_parser=alert_message_from_dict)
    assert restored.message is None
    assert restored.data == AlertMessage("Hi", AlertMessageFrequency.show_once())


def test_response_null_data_skips_parser():
    restored = response_from_dict({"data": None}, data_parser=alert_message_list_from_dicts)
    assert restored.data is None
    assert restored.status_code is None


def test_alert_list_must_be_array():
    with pytest.raises(TypeError):
        alert_message_list_from_dicts({"alertMessage": "Hi"})


def test_empty_indicator_round_trips():
    """An empty indicator string should decode, not abort the envelope."""
    raw = '{"statusCode": 200, "data": [{"alertMessage": "x", "alertIndicator": ""}]}'
    restored = response_from_json(raw, data_parser=alert_message_list_from_dicts)
    indicator = restored.data[0].alert_indicator
    assert indicator is AlertMessageFrequency("")
    assert indicator != AlertMessageFrequency.show_once()
    assert alert_message_to_dict(restored.data[0])["alertIndicator"] == ""


@pytest.mark.parametrize("status_code", [True, False, "200", [200], {"code": 200}])
def test_non_numeric_status_code_rejected(status_code):
    with pytest.raises(TypeError, match="statusCode"):
        response_from_dict({"statusCode": status_code})


def test_integer_status_code_becomes_float():
    assert response_from_dict({"statusCode": 404}).status_code == 404.0
