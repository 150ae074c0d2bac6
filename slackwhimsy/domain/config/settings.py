import os
import logging
from functools import lru_cache
from typing import Optional
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, SecretStr

# 환경변수 로드
load_dotenv()

# 로깅 설정
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

PRODUCTION = "production"
DEFAULT_CLAUDE_MODEL = "claude-sonnet-4-5-20250929"


class Settings(BaseModel):
    """프로세스 시작 시 한 번 읽어서 서비스에 주입하는 설정 값"""
    model_config = ConfigDict(frozen=True)

    slack_signing_secret: Optional[SecretStr] = None
    claude_api_key: Optional[SecretStr] = None
    app_env: str = "development"
    claude_model: str = DEFAULT_CLAUDE_MODEL
    generation_timeout_seconds: float = 45.0
    delivery_timeout_seconds: float = 10.0

    @property
    def is_production(self) -> bool:
        return self.app_env.strip().lower() == PRODUCTION

    @property
    def slack_configured(self) -> bool:
        return bool(self.slack_signing_secret and self.slack_signing_secret.get_secret_value())

    @property
    def claude_configured(self) -> bool:
        return bool(self.claude_api_key and self.claude_api_key.get_secret_value())


def _secret(name: str) -> Optional[SecretStr]:
    value = os.getenv(name)
    return SecretStr(value) if value else None


def load_settings() -> Settings:
    """환경변수에서 Settings 생성"""
    settings = Settings(
        slack_signing_secret=_secret("SLACK_SIGNING_SECRET"),
        claude_api_key=_secret("CLAUDE_API_KEY"),
        app_env=os.getenv("APP_ENV", "development"),
        claude_model=os.getenv("CLAUDE_MODEL", DEFAULT_CLAUDE_MODEL),
        generation_timeout_seconds=float(os.getenv("GENERATION_TIMEOUT_SECONDS", "45")),
        delivery_timeout_seconds=float(os.getenv("DELIVERY_TIMEOUT_SECONDS", "10")),
    )
    logger.info(
        f"Settings loaded: env={settings.app_env}, "
        f"slack_configured={settings.slack_configured}, "
        f"claude_configured={settings.claude_configured}"
    )
    return settings


@lru_cache
def get_settings() -> Settings:
    """프로세스 전체에서 공유하는 Settings 반환"""
    return load_settings()
