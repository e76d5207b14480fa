"""
Client Domain Model Objects

Defines the value objects the client library receives from the remote API:
    - AlertMessageFrequency (enum family)
    - AlertMessage (alert shown on the device)
    - AlertMessageResponse (generic response envelope)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about JSON or YAML
        - Hold enum fields as LiteralEnum values, never raw strings
        - Leave every field optional, because the API may omit any of them

Wire conversion lives in clenum.serialization.
"""

from dataclasses import dataclass
from typing import Any, Optional

from clenum.literal import LiteralEnum
from clenum.transforms import enum_transform


class AlertMessageFrequency(LiteralEnum):
    """
    How often an alert message is displayed.

    Literals:
        SHOW_ONCE: displayed once for this app instance
        SHOW_EVERYTIME: displayed every time (always) for this app instance

    Other literals sent by the API are admitted as new members.
    """

    family = "alert_message_frequency"

    @classmethod
    def show_once(cls) -> "AlertMessageFrequency":
        """Used to specify that an alert is only to be shown once."""
        return cls.for_literal("SHOW_ONCE")

    @classmethod
    def show_everytime(cls) -> "AlertMessageFrequency":
        """Used to specify that an alert is to be shown every time (always)."""
        return cls.for_literal("SHOW_EVERYTIME")


alert_message_frequency_transform = enum_transform(AlertMessageFrequency)


@dataclass
class AlertMessage:
    """
    An alert to be displayed on the device.

    Properties:
        alert_message:
            The message text (wire key "alertMessage")

        alert_indicator:
            How often to display it (wire key "alertIndicator")
            Example: AlertMessageFrequency.show_once()
    """

    alert_message: Optional[str] = None
    alert_indicator: Optional[AlertMessageFrequency] = None


@dataclass
class AlertMessageResponse:
    """
    Response envelope returned by the API.

    Properties:
        status_code:
            HTTP status code (e.g. 200, 403), repeated in the body for
            clients that cannot easily read it from the transport
            (wire key "statusCode")

        message:
            Human-readable message, designed for end-user consumption

        data:
            The resource being returned. It could be a list of alert
            messages, a single one, or any other payload.
    """

    status_code: Optional[float] = None
    message: Optional[str] = None
    data: Optional[Any] = None
