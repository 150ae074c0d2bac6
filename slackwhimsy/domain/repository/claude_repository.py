import logging
from anthropic import AsyncAnthropic, APIError
from ..config.settings import DEFAULT_CLAUDE_MODEL
from ..exception.exceptions import GenerationException

logger = logging.getLogger(__name__)


class ClaudeRepository:
    """Claude API 접근을 담당하는 Repository"""

    def __init__(self, api_key: str, model: str = DEFAULT_CLAUDE_MODEL):
        self.client = AsyncAnthropic(api_key=api_key)
        self.model = model

    async def generate(self, prompt: str, max_tokens: int, temperature: float) -> str:
        """단일 user 프롬프트로 텍스트 생성 후 텍스트 블록을 이어 붙여 반환"""
        try:
            message = await self.client.messages.create(
                model=self.model,
                max_tokens=max_tokens,
                temperature=temperature,
                messages=[
                    {"role": "user", "content": prompt}
                ]
            )
        except APIError as e:
            logger.error(f"Claude API error: {str(e)}")
            raise GenerationException(f"Claude API error: {str(e)}") from e

        blocks = getattr(message, "content", None)
        if not blocks:
            raise GenerationException("Claude response has no content")

        text = "".join(getattr(block, "text", "") or "" for block in blocks).strip()
        if not text:
            raise GenerationException("Claude response has no text")

        logger.info(f"Claude response received ({len(text)} chars)")
        return text

    async def close(self) -> None:
        """HTTP 클라이언트 정리"""
        await self.client.close()
