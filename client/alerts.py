"""Alert presenters: where screens send user-facing messages and confirmations."""

from dataclasses import dataclass
from typing import List

from utils.logger import setup_logger

logger = setup_logger(__name__)


@dataclass
class Alert:
    title: str
    message: str


class AlertPresenter:
    """Interface a UI layer implements to show alerts and ask for confirmation."""

    def alert(self, title: str, message: str) -> None:
        raise NotImplementedError

    async def confirm(
        self,
        title: str,
        message: str,
        confirm_label: str = "OK",
        destructive: bool = False,
    ) -> bool:
        raise NotImplementedError


class LoggingAlertPresenter(AlertPresenter):
    """Headless presenter that logs and records every alert.

    Confirmations are answered with ``confirm_answer``.
    """

    def __init__(self, confirm_answer: bool = False):
        self.confirm_answer = confirm_answer
        self.alerts: List[Alert] = []
        self.confirmations: List[Alert] = []

    def alert(self, title: str, message: str) -> None:
        logger.info(f"[alert] {title}: {message}")
        self.alerts.append(Alert(title, message))

    async def confirm(
        self,
        title: str,
        message: str,
        confirm_label: str = "OK",
        destructive: bool = False,
    ) -> bool:
        logger.info(f"[confirm] {title}: {message} -> {self.confirm_answer}")
        self.confirmations.append(Alert(title, message))
        return self.confirm_answer
