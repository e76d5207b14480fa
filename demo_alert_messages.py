#!/usr/bin/env python3
"""
Demo: Decode an API response carrying alert messages and re-encode it.

Shows registry identity, case-insensitive equality, and how an unknown
frequency code is carried through unchanged.
"""

import logging

from clenum import get_registry
from clenum.model import AlertMessageFrequency
from clenum.serialization import (
    alert_message_list_from_dicts,
    alert_message_list_to_dicts,
    alert_message_to_yaml,
    response_from_json,
    response_to_json,
)

RAW_RESPONSE = """
{
  "statusCode": 200,
  "message": "OK",
  "data": [
    {"alertMessage": "Scheduled maintenance tonight", "alertIndicator": "SHOW_ONCE"},
    {"alertMessage": "Update your app", "alertIndicator": "SHOW_EVERYTIME"},
    {"alertMessage": "Weekly digest", "alertIndicator": "SHOW_WEEKLY"},
    {"alertMessage": "No indicator"}
  ]
}
"""


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    response = response_from_json(RAW_RESPONSE, data_parser=alert_message_list_from_dicts)

    print("=" * 70)
    print(f"RESPONSE {response.status_code:.0f}: {response.message}")
    print("=" * 70)
    for alert in response.data:
        print(f"  {alert.alert_message!r:40} {alert.alert_indicator!r}")
    print()

    first = response.data[0].alert_indicator
    print("Decoded SHOW_ONCE is show_once():", first is AlertMessageFrequency.show_once())
    print("SHOW_ONCE == show_once:", first == AlertMessageFrequency("show_once"))
    print("Registered literals:", get_registry().literals(AlertMessageFrequency.family))
    print()

    print("Re-encoded:")
    print(response_to_json(response, data_serializer=alert_message_list_to_dicts))
    print()
    print("First alert as YAML:")
    print(alert_message_to_yaml(response.data[0]))


if __name__ == "__main__":
    main()
