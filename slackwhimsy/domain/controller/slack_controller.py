import logging
from functools import partial
from typing import Optional
from fastapi import APIRouter, Request, BackgroundTasks, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from ..config.settings import Settings, get_settings
from ..dto.slack_dto import UrlVerification
from ..flow import CommandFlow, get_flow, get_flow_for_command
from ..repository.claude_repository import ClaudeRepository
from ..repository.slack_repository import SlackRepository
from ..service.admission_service import SlackAdmissionService
from ..service.delivery_service import DeliveryService
from ..service.scheduler import TaskScheduler, BackgroundTaskScheduler
from ..utils.slack_messages import create_ack_response

logger = logging.getLogger(__name__)

router = APIRouter(tags=["slack"])


def get_admission_service(settings: Settings = Depends(get_settings)) -> SlackAdmissionService:
    """SlackAdmissionService 인스턴스 생성"""
    return SlackAdmissionService(settings)


def get_delivery_service(settings: Settings = Depends(get_settings)) -> DeliveryService:
    """DeliveryService 인스턴스 생성"""
    return DeliveryService(
        claude_repository_factory=partial(ClaudeRepository, model=settings.claude_model),
        slack_repository=SlackRepository(timeout=settings.delivery_timeout_seconds),
        timeout_seconds=settings.generation_timeout_seconds
    )


def get_task_scheduler(background_tasks: BackgroundTasks) -> TaskScheduler:
    """응답 이후 실행 스케줄러 생성"""
    return BackgroundTaskScheduler(background_tasks)


async def _handle_command(
    request: Request,
    flow_for,
    admission_service: SlackAdmissionService,
    delivery_service: DeliveryService,
    scheduler: TaskScheduler
):
    result = await admission_service.admit(request)
    if isinstance(result, UrlVerification):
        return PlainTextResponse(result.challenge, status_code=200)

    command = result.command
    flow: Optional[CommandFlow] = flow_for(command)
    if flow is None:
        logger.info(f"Unknown command: {command.command}")
        return create_ack_response("Unknown command", "ephemeral")

    logger.info(f"Received command: {flow.slash_command}, channel: {command.channel_id}")

    if command.response_url:
        scheduler.schedule(delivery_service.deliver, result, flow)
    else:
        logger.info(f"No response_url for {flow.slash_command}; sending acknowledgment only")

    return create_ack_response(flow.ack_text, flow.ack_response_type)


@router.post("/slack/commands")
async def slack_command(
    request: Request,
    admission_service: SlackAdmissionService = Depends(get_admission_service),
    delivery_service: DeliveryService = Depends(get_delivery_service),
    scheduler: TaskScheduler = Depends(get_task_scheduler)
):
    """Slack 슬래시 커맨드 엔드포인트 (command 필드로 분기)"""
    return await _handle_command(
        request,
        lambda command: get_flow_for_command(command.command),
        admission_service,
        delivery_service,
        scheduler
    )


@router.post("/api/slack/{flow_name}")
async def slack_flow_command(
    flow_name: str,
    request: Request,
    admission_service: SlackAdmissionService = Depends(get_admission_service),
    delivery_service: DeliveryService = Depends(get_delivery_service),
    scheduler: TaskScheduler = Depends(get_task_scheduler)
):
    """커맨드별 Slack 엔드포인트 (/api/slack/emojify 등)"""
    flow = get_flow(flow_name)
    if flow is None:
        raise HTTPException(status_code=404, detail=f"Unknown command endpoint: {flow_name}")
    return await _handle_command(
        request,
        lambda command: flow,
        admission_service,
        delivery_service,
        scheduler
    )
