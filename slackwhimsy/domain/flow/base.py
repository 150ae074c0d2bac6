from abc import ABC, abstractmethod
from typing import Optional
from ..dto.slack_dto import ResponseType, SlackCommand


class CommandFlow(ABC):
    """
    슬래시 커맨드 하나의 설정.

    인증, 즉시 응답, 백그라운드 전송은 모든 커맨드가 공유하고
    커맨드마다 다른 것은 프롬프트, 결과 포맷, 실패 메시지, 응답 타입뿐이다.
    """
    name: str = ""
    ack_text: str = "_Working on it..._"
    ack_response_type: ResponseType = "ephemeral"
    response_type: ResponseType = "in_channel"
    replace_original: bool = False
    fallback_text: str = "Something went wrong. Please try again."
    max_tokens: int = 300
    temperature: float = 1.0

    @property
    def slash_command(self) -> str:
        return f"/{self.name}"

    @abstractmethod
    def build_prompt(self, text: str, user_id: Optional[str]) -> str:
        ...

    def format_result(self, command: SlackCommand, generated: str) -> str:
        return generated

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.slash_command}>"
