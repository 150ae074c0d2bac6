from .claude_repository import ClaudeRepository
from .slack_repository import SlackRepository

__all__ = [
    "ClaudeRepository",
    "SlackRepository"
]
