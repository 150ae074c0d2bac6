import asyncio
import hashlib
import hmac
from typing import Dict, List, Optional
from urllib.parse import urlencode

from fastapi import Request

from slackwhimsy.domain.config.settings import Settings
from slackwhimsy.domain.exception.exceptions import DeliveryException, GenerationException

SIGNING_SECRET = "8f742231b10e8888abcd99yyyzzz85a5"
CLAUDE_KEY = "sk-ant-test-key"
RESPONSE_URL = "https://hooks.slack.com/commands/T000/123/abc"


def make_settings(**overrides) -> Settings:
	values = {
		"slack_signing_secret": SIGNING_SECRET,
		"claude_api_key": CLAUDE_KEY,
		"app_env": "development",
	}
	values.update(overrides)
	return Settings(**values)


def sign(body: str, timestamp: str, secret: str = SIGNING_SECRET) -> str:
	digest = hmac.new(secret.encode(), f"v0:{timestamp}:{body}".encode(), hashlib.sha256).hexdigest()
	return f"v0={digest}"


def form(**fields) -> str:
	return urlencode(fields)


def make_request(body: str, headers: Optional[Dict[str, str]] = None, calls: Optional[List[str]] = None) -> Request:
	scope = {
		"type": "http",
		"method": "POST",
		"path": "/api/slack/emojify",
		"headers": [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()],
	}

	async def receive():
		if calls is not None:
			calls.append("receive")
		return {"type": "http.request", "body": body.encode("utf-8"), "more_body": False}

	return Request(scope, receive)


class FakeClaudeRepository:
	def __init__(self, text: str = "🌾🐄", error: Optional[Exception] = None, delay: float = 0.0):
		self.text = text
		self.error = error
		self.delay = delay
		self.calls: List[dict] = []
		self.closed = 0

	async def generate(self, prompt: str, max_tokens: int, temperature: float) -> str:
		self.calls.append({"prompt": prompt, "max_tokens": max_tokens, "temperature": temperature})
		if self.delay:
			await asyncio.sleep(self.delay)
		if self.error is not None:
			raise self.error
		return self.text

	async def close(self) -> None:
		self.closed += 1


class RecordingSlackRepository:
	def __init__(self, fail_times: int = 0):
		self.fail_times = fail_times
		self.posts: List[tuple] = []

	def post_to_response_url(self, response_url: str, message: dict):
		self.posts.append((response_url, message))
		if self.fail_times > 0:
			self.fail_times -= 1
			raise DeliveryException("connection refused")


__all__ = [
	"SIGNING_SECRET",
	"CLAUDE_KEY",
	"RESPONSE_URL",
	"make_settings",
	"sign",
	"form",
	"make_request",
	"FakeClaudeRepository",
	"RecordingSlackRepository",
	"GenerationException",
]
