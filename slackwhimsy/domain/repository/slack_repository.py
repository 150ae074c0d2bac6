import logging
import requests
from typing import Dict, Any
from ..exception.exceptions import DeliveryException
from ..utils.slack_messages import JSON_UTF8, encode_message

logger = logging.getLogger(__name__)


class SlackRepository:
    """Slack response_url 전송을 담당하는 Repository"""

    def __init__(self, timeout: float = 10.0):
        self.timeout = timeout

    def post_to_response_url(self, response_url: str, message: Dict[str, Any]) -> requests.Response:
        """response_url로 메시지 전송"""
        try:
            response = requests.post(
                response_url,
                data=encode_message(message),
                headers={"content-type": JSON_UTF8},
                timeout=self.timeout
            )
            logger.info(f"Slack response status: {response.status_code}")
            logger.info(f"Slack response body: {response.text}")
            return response
        except requests.RequestException as e:
            logger.error(f"Failed to send response to Slack: {str(e)}")
            raise DeliveryException(f"response_url 전송 실패: {str(e)}") from e
