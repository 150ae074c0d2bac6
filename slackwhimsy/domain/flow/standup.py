from typing import Optional
from .base import CommandFlow
from ..dto.slack_dto import SlackCommand

PROMPT = '''
Turn these notes into an absurdly heroic daily standup update, 2-4 sentences,
workplace-safe, in plain text without markdown or labels.
Refer to the author as {author}.
Notes: """{text}"""'''


def mention(user_id: Optional[str]) -> Optional[str]:
    return f"<@{user_id}>" if user_id else None


class StandupFlow(CommandFlow):
    name = "standup"
    ack_text = "_Drafting your standup..._"
    ack_response_type = "ephemeral"
    response_type = "in_channel"
    replace_original = True
    fallback_text = "Standup: still standing. Details to follow after the next sync."
    max_tokens = 300
    temperature = 1.0

    def build_prompt(self, text: str, user_id: Optional[str]) -> str:
        # 프롬프트에는 Slack ID 대신 중립적인 호칭만 넣는다
        author = "our teammate" if user_id else "the team"
        return PROMPT.format(author=author, text=text or "did some things, will do more things")

    def format_result(self, command: SlackCommand, generated: str) -> str:
        who = mention(command.user_id)
        if who:
            return f"📣 {who}'s standup\n\n{generated}"
        return f"📣 {generated}"
