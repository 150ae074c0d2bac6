from typing import Any, Callable, Protocol
from fastapi import BackgroundTasks


class TaskScheduler(Protocol):
    """응답 전송 후 실행할 작업을 등록하는 인터페이스"""

    def schedule(self, func: Callable[..., Any], *args: Any) -> None:
        ...


class BackgroundTaskScheduler:
    """FastAPI BackgroundTasks 기반 스케줄러 (응답이 전송된 뒤 실행)"""

    def __init__(self, background_tasks: BackgroundTasks):
        self.background_tasks = background_tasks

    def schedule(self, func: Callable[..., Any], *args: Any) -> None:
        self.background_tasks.add_task(func, *args)
