from typing import Optional
from .base import CommandFlow
from ..dto.slack_dto import SlackCommand

PROMPT = '''
You are an emoji translator. Summarize the meaning of the user's message using only emojis.

User's message: """{text}"""

Rules:
- Use 3-12 emojis that capture the essence of the message
- Order them so they tell the "story"
- No text, just emojis

Examples:
- "I'm going to the store to buy groceries" -> 🚶‍♂️🏪🛒🍎🥕
- "The meeting was really long and boring" -> 💼⏰😴💤
- "I shipped the code to production" -> 💻✈️🏭✅🎉

Output ONLY emojis, no other text or explanation.'''


class EmojifyFlow(CommandFlow):
    name = "emojify"
    ack_text = "_Translating to emoji..._"
    ack_response_type = "in_channel"
    response_type = "in_channel"
    fallback_text = "❌🤷‍♂️ (Translation failed)"
    max_tokens = 150
    temperature = 0.8

    def build_prompt(self, text: str, user_id: Optional[str]) -> str:
        return PROMPT.format(text=text or "hello")

    def format_result(self, command: SlackCommand, generated: str) -> str:
        if command.text:
            return f'💬 _"{command.text}"_\n\n{generated}'
        return generated
