from .slack_dto import (
    ResponseType,
    SlackCommand,
    ValidatedCommand,
    UrlVerification,
    SlackCommandResponse,
    SlackDeliveryMessage
)
from .health_dto import HealthResponse

__all__ = [
    "ResponseType",
    "SlackCommand",
    "ValidatedCommand",
    "UrlVerification",
    "SlackCommandResponse",
    "SlackDeliveryMessage",
    "HealthResponse"
]
