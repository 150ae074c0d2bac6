from .admission_service import SlackAdmissionService
from .delivery_service import DeliveryService
from .scheduler import TaskScheduler, BackgroundTaskScheduler

__all__ = ["SlackAdmissionService", "DeliveryService", "TaskScheduler", "BackgroundTaskScheduler"]
