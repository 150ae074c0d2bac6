from typing import Optional
from .base import CommandFlow

PROMPT = '''
You take a short Slack message from someone who is *home sick* and rewrite it as:
1. A single-sentence funny, harmless reason for why they're sick.
   Absurd but workplace-safe (e.g. "caught a severe case of meetings"). Never mention real illnesses.
2. A second paragraph of overly corporate jargon expanding on their work,
   3-6 sentences, under 900 characters.
Output both parts as plain text separated by a blank line, without markdown, quotes, or labels.
User's input: """{text}"""'''


class SickFlow(CommandFlow):
    name = "sick"
    ack_text = "_Calibrating immune system..._"
    ack_response_type = "ephemeral"
    response_type = "ephemeral"
    fallback_text = "Feeling under the weather but continuing to synergize strategically pending AI recovery."
    max_tokens = 500
    temperature = 1.0

    def build_prompt(self, text: str, user_id: Optional[str]) -> str:
        return PROMPT.format(text=text or "(no notes provided)")
