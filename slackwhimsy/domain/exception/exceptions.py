from fastapi import HTTPException


class SlackRequestException(HTTPException):
    """동기 응답 단계에서 요청을 거부하는 예외 (plain text로 응답)"""
    def __init__(self, status_code: int = 400, detail: str = "Bad request"):
        super().__init__(status_code=status_code, detail=detail)


class ConfigurationException(SlackRequestException):
    """설정 관련 예외"""
    def __init__(self, status_code: int = 500, detail: str = "Missing env vars"):
        super().__init__(status_code=status_code, detail=detail)


class AuthenticationException(SlackRequestException):
    """Slack 서명 검증 실패 예외"""
    def __init__(self, status_code: int = 401, detail: str = "Bad signature"):
        super().__init__(status_code=status_code, detail=detail)


class GenerationException(Exception):
    """Claude 텍스트 생성 실패 (백그라운드 작업 안에서만 처리)"""


class GenerationTimeoutException(GenerationException):
    """Claude 응답 대기 시간 초과"""


class DeliveryException(Exception):
    """response_url 전송 실패"""
