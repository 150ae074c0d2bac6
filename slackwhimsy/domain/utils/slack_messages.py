import json
from typing import Dict, Any
from urllib.parse import parse_qs
from fastapi import Response

from ..dto.slack_dto import ResponseType, SlackCommand, SlackCommandResponse, SlackDeliveryMessage

JSON_UTF8 = "application/json; charset=utf-8"


def parse_command_body(raw_body: str) -> SlackCommand:
    """x-www-form-urlencoded 본문을 SlackCommand로 변환"""
    params = parse_qs(raw_body, keep_blank_values=True)

    def first(key: str):
        values = params.get(key)
        return values[0] if values else None

    return SlackCommand(
        text=(first("text") or "").strip(),
        response_url=first("response_url") or None,
        user_id=first("user_id") or None,
        type=first("type"),
        challenge=first("challenge"),
        command=first("command"),
        channel_id=first("channel_id"),
    )


def _dump(message: Dict[str, Any]) -> bytes:
    return json.dumps(message, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def create_ack_response(text: str, response_type: ResponseType = "ephemeral") -> Response:
    """Slack 3초 제한 안에 돌려줄 즉시 응답 생성"""
    body = SlackCommandResponse(response_type=response_type, text=text)
    return Response(
        content=_dump(body.model_dump()),
        status_code=200,
        media_type=JSON_UTF8,
    )


def build_delivery_message(
    text: str,
    response_type: ResponseType = "in_channel",
    replace_original: bool = False
) -> Dict[str, Any]:
    """response_url로 보낼 메시지 본문 생성"""
    message = SlackDeliveryMessage(
        response_type=response_type,
        text=text,
        replace_original=True if replace_original else None,
    )
    return message.model_dump(exclude_none=True)


def encode_message(message: Dict[str, Any]) -> bytes:
    """JSON 본문 직렬화 (UTF-8)"""
    return _dump(message)
