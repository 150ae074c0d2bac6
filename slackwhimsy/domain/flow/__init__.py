from typing import Dict, Optional
from .base import CommandFlow
from .emojify import EmojifyFlow
from .farming import FarmingFlow
from .sick import SickFlow
from .standup import StandupFlow

FLOWS: Dict[str, CommandFlow] = {
    flow.name: flow for flow in (EmojifyFlow(), FarmingFlow(), SickFlow(), StandupFlow())
}


def get_flow(name: str) -> Optional[CommandFlow]:
    """엔드포인트 이름으로 커맨드 설정 조회"""
    return FLOWS.get(name)


def get_flow_for_command(command: Optional[str]) -> Optional[CommandFlow]:
    """슬래시 커맨드("/emojify")로 설정 조회"""
    if not command:
        return None
    return FLOWS.get(command.strip().lstrip("/"))


__all__ = [
    "CommandFlow",
    "EmojifyFlow",
    "FarmingFlow",
    "SickFlow",
    "StandupFlow",
    "FLOWS",
    "get_flow",
    "get_flow_for_command"
]
