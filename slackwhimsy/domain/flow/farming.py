from typing import Optional
from .base import CommandFlow
from ..dto.slack_dto import SlackCommand

PROMPT = '''
You are a quirky farming advisor giving hilariously bad (or occasionally accurate) farming advice.

The user asked: """{text}"""

Write 2-4 sentences of farming advice that is:
- Absurdly funny but workplace-safe
- Delivered in a deadpan, serious tone
- Sometimes completely wrong, sometimes accidentally correct but explained weirdly

Keep it short and punchy. Output plain text only (no markdown, no quotes, no labels).'''


class FarmingFlow(CommandFlow):
    name = "farming"
    ack_text = "_Consulting the almanac..._"
    ack_response_type = "in_channel"
    response_type = "in_channel"
    fallback_text = "🚜 The crops have failed. Try rotating your keyboard 90 degrees and planting again."
    max_tokens = 300
    temperature = 1.0

    def build_prompt(self, text: str, user_id: Optional[str]) -> str:
        return PROMPT.format(text=text or "general farming advice")

    def format_result(self, command: SlackCommand, generated: str) -> str:
        if command.text:
            return f"🚜 *Farming Advice: {command.text}*\n\n{generated}"
        return f"🚜 {generated}"
