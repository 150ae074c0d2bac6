import asyncio
import logging
from typing import Callable
from fastapi.concurrency import run_in_threadpool
from ..dto.slack_dto import ValidatedCommand
from ..exception.exceptions import GenerationTimeoutException
from ..flow.base import CommandFlow
from ..repository.claude_repository import ClaudeRepository
from ..repository.slack_repository import SlackRepository
from ..utils.slack_messages import build_delivery_message

logger = logging.getLogger(__name__)

GENERATION_TIMEOUT_SECONDS = 45.0


def _log_abandoned_generation(task: "asyncio.Future") -> None:
    """시간 초과로 버려진 생성 작업이 나중에 끝났을 때 결과만 기록"""
    if task.cancelled():
        logger.info("Abandoned Claude request was cancelled")
        return
    error = task.exception()
    if error is not None:
        logger.warning(f"Abandoned Claude request failed after timeout: {str(error)}")
    else:
        logger.info("Abandoned Claude request finished after timeout; result discarded")


class DeliveryService:
    """응답 전송 후 Claude 결과를 response_url로 보내는 Service"""

    def __init__(
        self,
        claude_repository_factory: Callable[[str], ClaudeRepository],
        slack_repository: SlackRepository,
        timeout_seconds: float = GENERATION_TIMEOUT_SECONDS
    ):
        self.claude_repository_factory = claude_repository_factory
        self.slack_repository = slack_repository
        self.timeout_seconds = timeout_seconds

    async def deliver(self, validated: ValidatedCommand, flow: CommandFlow) -> None:
        """
        백그라운드 작업 본체. 호출자에게 예외를 던지지 않는다.

        성공하면 포맷된 결과를, 실패하면 flow.fallback_text를 response_url로 한 번 전송한다.
        fallback 전송까지 실패하면 로그만 남기고 끝낸다 (재시도 없음).
        """
        command = validated.command
        response_url = command.response_url
        if not response_url:
            return

        logger.info(f"Starting {flow.name} background task")
        try:
            prompt = flow.build_prompt(command.text, command.user_id)
            generated = await self._generate_with_timeout(validated, flow, prompt)
            formatted = flow.format_result(command, generated)
            await self._post(
                response_url,
                build_delivery_message(formatted, flow.response_type, flow.replace_original)
            )
        except Exception as e:
            logger.error(f"{flow.name} generation or delivery failed: {str(e)}")
            try:
                await self._post(
                    response_url,
                    build_delivery_message(flow.fallback_text, flow.response_type, flow.replace_original)
                )
            except Exception as fallback_error:
                logger.error(f"Failed to send fallback response to Slack: {str(fallback_error)}")
        logger.info(f"{flow.name} background task completed")

    async def _generate_with_timeout(self, validated: ValidatedCommand, flow: CommandFlow, prompt: str) -> str:
        """
        생성 요청과 타이머를 동시에 시작해 먼저 끝나는 쪽을 따른다.

        타이머가 이기면 생성 요청은 취소하지 않고 버려둔다.
        (HTTP 요청이 취소를 지원한다고 가정할 수 없기 때문)
        """
        repository = self.claude_repository_factory(validated.claude_api_key.get_secret_value())
        generation = asyncio.ensure_future(self._generate_and_close(repository, prompt, flow))
        timer = asyncio.ensure_future(asyncio.sleep(self.timeout_seconds))

        await asyncio.wait({generation, timer}, return_when=asyncio.FIRST_COMPLETED)
        timer.cancel()

        if not generation.done():
            generation.add_done_callback(_log_abandoned_generation)
            raise GenerationTimeoutException(f"Claude API timeout after {self.timeout_seconds:g}s")
        return generation.result()

    async def _generate_and_close(self, repository: ClaudeRepository, prompt: str, flow: CommandFlow) -> str:
        # 버려진 요청도 끝나는 시점에 클라이언트를 닫는다
        try:
            return await repository.generate(prompt, max_tokens=flow.max_tokens, temperature=flow.temperature)
        finally:
            try:
                await repository.close()
            except Exception as e:
                logger.warning(f"Failed to close Claude client: {str(e)}")

    async def _post(self, response_url: str, message: dict) -> None:
        await run_in_threadpool(self.slack_repository.post_to_response_url, response_url, message)
