import logging
from typing import Union
from fastapi import Request
from ..config.settings import Settings
from ..dto.slack_dto import ValidatedCommand, UrlVerification
from ..exception.exceptions import ConfigurationException, AuthenticationException
from ..utils.signature import verify_slack_signature
from ..utils.slack_messages import parse_command_body

logger = logging.getLogger(__name__)

URL_VERIFICATION = "url_verification"
SIGNATURE_HEADER = "x-slack-signature"
TIMESTAMP_HEADER = "x-slack-request-timestamp"


class SlackAdmissionService:
    """Slack 요청 검증을 담당하는 Service"""

    def __init__(self, settings: Settings):
        self.settings = settings

    async def admit(self, request: Request) -> Union[ValidatedCommand, UrlVerification]:
        """
        요청 검증 후 커맨드 반환.

        - 필수 설정이 없으면 ConfigurationException (500)
        - url_verification 요청은 서명 검증 없이 UrlVerification 반환
        - production 모드에서 서명이 틀리면 AuthenticationException (401)
        """
        signing_secret = self.settings.slack_signing_secret
        claude_api_key = self.settings.claude_api_key
        if not self.settings.slack_configured or not self.settings.claude_configured:
            logger.error("Missing required configuration: SLACK_SIGNING_SECRET or CLAUDE_API_KEY")
            raise ConfigurationException()

        # 서명은 파싱 전 원본 본문으로 계산해야 한다
        raw_body = (await request.body()).decode("utf-8", errors="replace")
        command = parse_command_body(raw_body)

        if command.type == URL_VERIFICATION:
            logger.info("Slack URL verification request")
            return UrlVerification(challenge=command.challenge or "")

        if self.settings.is_production:
            verified = verify_slack_signature(
                signing_secret=signing_secret.get_secret_value(),
                timestamp=request.headers.get(TIMESTAMP_HEADER),
                signature=request.headers.get(SIGNATURE_HEADER),
                raw_body=raw_body,
            )
            if not verified:
                logger.warning("Rejected Slack request: bad or stale signature")
                raise AuthenticationException()

        return ValidatedCommand(command=command, claude_api_key=claude_api_key)
