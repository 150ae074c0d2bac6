import logging
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from .config.settings import get_settings
from .controller import slack_router, health_router
from .exception.exceptions import SlackRequestException

logger = logging.getLogger(__name__)


app = FastAPI(title="Slack Whimsy Bot")

app.include_router(slack_router)
app.include_router(health_router)

# 잘못된 설정은 첫 요청이 아니라 시작 시점에 드러나도록 미리 읽는다
get_settings()


@app.exception_handler(SlackRequestException)
async def slack_request_exception_handler(request: Request, exc: SlackRequestException):
    """요청 거부는 Slack이 그대로 보여줄 수 있도록 plain text로 응답"""
    logger.info(f"Rejected {request.url.path}: {exc.status_code} {exc.detail}")
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
