import hmac
import hashlib
import time
from typing import Optional

SIGNATURE_VERSION = "v0"
REPLAY_WINDOW_SECONDS = 60 * 5


def verify_slack_signature(
    signing_secret: str,
    timestamp: Optional[str],
    signature: Optional[str],
    raw_body: str,
    now: Optional[float] = None
) -> bool:
    """
    Slack 요청 서명 검증.

    timestamp가 현재 시각에서 5분 이상 벗어나면 서명이 맞아도 거부한다.
    서명은 "v0:{timestamp}:{raw_body}"의 HMAC-SHA256 hex 값에 "v0="를 붙인 형태.
    """
    if not timestamp or not signature:
        return False

    try:
        request_ts = int(timestamp)
    except (TypeError, ValueError):
        return False

    current = int(time.time() if now is None else now)
    if abs(current - request_ts) > REPLAY_WINDOW_SECONDS:
        return False

    basestring = f"{SIGNATURE_VERSION}:{timestamp}:{raw_body}".encode("utf-8")
    digest = hmac.new(
        signing_secret.encode("utf-8"),
        basestring,
        hashlib.sha256
    ).hexdigest()
    expected = f"{SIGNATURE_VERSION}={digest}"

    try:
        return hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))
    except (TypeError, ValueError, UnicodeError):
        return False
