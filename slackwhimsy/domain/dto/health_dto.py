from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check 응답 DTO"""
    status: str
    slack_configured: bool
    claude_configured: bool
    signature_enforced: bool
