"""Async client and headless screen state for the LifeSync API."""

from client.alerts import Alert, AlertPresenter, LoggingAlertPresenter
from client.api_client import ApiClient, ApiError
from client.goal_client import GoalService
from client.schedule_client import ScheduleService
from client.schedule_screen import NewTaskForm, ScheduleScreen

__all__ = [
    "Alert",
    "AlertPresenter",
    "LoggingAlertPresenter",
    "ApiClient",
    "ApiError",
    "GoalService",
    "ScheduleService",
    "NewTaskForm",
    "ScheduleScreen",
]
