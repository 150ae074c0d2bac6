from .signature import verify_slack_signature, REPLAY_WINDOW_SECONDS
from .slack_messages import (
    parse_command_body,
    create_ack_response,
    build_delivery_message,
    encode_message,
    JSON_UTF8
)

__all__ = [
    "verify_slack_signature",
    "REPLAY_WINDOW_SECONDS",
    "parse_command_body",
    "create_ack_response",
    "build_delivery_message",
    "encode_message",
    "JSON_UTF8"
]
