"""
Serialization helpers for client model objects (AlertMessage, responses).

Provides JSON/YAML round-trip via an intermediate dict representation that
mirrors the API's wire keys. Enum fields go through their EnumTransform.
"""
from __future__ import annotations

import json
from typing import Any, Callable, Dict, Optional

import yaml

from clenum.model import (
    AlertMessage,
    AlertMessageResponse,
    alert_message_frequency_transform,
)


def _require_object(d: Any, what: str) -> Dict[str, Any]:
    if not isinstance(d, dict):
        raise TypeError(f"Expected a JSON object for {what}, got {type(d).__name__}")
    return d


def _status_code_from_json(value: Any) -> Optional[float]:
    if value is None:
        return None
    # bool is an int subclass; JSON true/false is not a status code
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Expected a JSON number for statusCode, got {type(value).__name__}")
    return float(value)


def alert_message_to_dict(m: AlertMessage) -> Dict[str, Any]:
    return {
        "alertMessage": m.alert_message,
        "alertIndicator": alert_message_frequency_transform.to_json(m.alert_indicator),
    }


def alert_message_from_dict(d: Any) -> AlertMessage:
    d = _require_object(d, "AlertMessage")
    return AlertMessage(
        alert_message=d.get("alertMessage"),
        alert_indicator=alert_message_frequency_transform.from_json(d.get("alertIndicator")),
    )


def response_to_dict(
    r: AlertMessageResponse,
    data_serializer: Optional[Callable[[Any], Any]] = None,
) -> Dict[str, Any]:
    data = r.data
    if data is not None and data_serializer is not None:
        data = data_serializer(data)
    return {"statusCode": r.status_code, "message": r.message, "data": data}


def response_from_dict(
    d: Any,
    data_parser: Optional[Callable[[Any], Any]] = None,
) -> AlertMessageResponse:
    """
    Build a response envelope from its dict form.

    Args:
        d: Decoded JSON object
        data_parser: Optional callable applied to a non-null "data" payload
            (e.g. alert_message_from_dict, or a function parsing a list)

    Returns:
        AlertMessageResponse

    Raises:
        TypeError: If d is not an object or statusCode is not a number
    """
    d = _require_object(d, "AlertMessageResponse")
    status_code = _status_code_from_json(d.get("statusCode"))
    data = d.get("data")
    if data is not None and data_parser is not None:
        data = data_parser(data)
    return AlertMessageResponse(
        status_code=status_code,
        message=d.get("message"),
        data=data,
    )


def alert_message_list_to_dicts(messages: list) -> list:
    return [alert_message_to_dict(m) for m in messages]


def alert_message_list_from_dicts(items: Any) -> list:
    if not isinstance(items, list):
        raise TypeError(f"Expected a JSON array of alert messages, got {type(items).__name__}")
    return [alert_message_from_dict(item) for item in items]


def alert_message_to_json(m: AlertMessage) -> str:
    return json.dumps(alert_message_to_dict(m), sort_keys=True)


def alert_message_from_json(s: str) -> AlertMessage:
    d = json.loads(s)
    return alert_message_from_dict(d)


def alert_message_to_yaml(m: AlertMessage) -> str:
    return yaml.safe_dump(alert_message_to_dict(m))


def alert_message_from_yaml(s: str) -> AlertMessage:
    d = yaml.safe_load(s)
    return alert_message_from_dict(d)


def response_to_json(
    r: AlertMessageResponse,
    data_serializer: Optional[Callable[[Any], Any]] = None,
) -> str:
    return json.dumps(response_to_dict(r, data_serializer), sort_keys=True)


def response_from_json(
    s: str,
    data_parser: Optional[Callable[[Any], Any]] = None,
) -> AlertMessageResponse:
    d = json.loads(s)
    return response_from_dict(d, data_parser)
