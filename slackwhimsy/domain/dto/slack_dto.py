from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, SecretStr

ResponseType = Literal["ephemeral", "in_channel"]


class SlackCommand(BaseModel):
    """슬래시 커맨드 요청 본문 DTO"""
    model_config = ConfigDict(frozen=True)

    text: str = ""
    response_url: Optional[str] = None
    user_id: Optional[str] = None
    type: Optional[str] = None
    challenge: Optional[str] = None
    command: Optional[str] = None
    channel_id: Optional[str] = None


class ValidatedCommand(BaseModel):
    """검증을 통과한 커맨드와 Claude API 키"""
    model_config = ConfigDict(frozen=True)

    command: SlackCommand
    claude_api_key: SecretStr


class UrlVerification(BaseModel):
    """Slack URL verification 요청"""
    challenge: str = ""


class SlackCommandResponse(BaseModel):
    """Slack 커맨드 응답 DTO"""
    response_type: ResponseType
    text: str


class SlackDeliveryMessage(SlackCommandResponse):
    """response_url로 전송하는 후속 메시지 DTO"""
    replace_original: Optional[bool] = None
