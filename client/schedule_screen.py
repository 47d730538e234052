"""Daily schedule screen state.

Holds everything the schedule tab shows for one selected day and the
operations its gestures trigger. Every network operation catches its own
failure and reports it through the alert presenter, so the screen stays
usable after any error. The server's response always replaces local state.
"""

from dataclasses import asdict, dataclass
from datetime import date, timedelta
from typing import Any, Dict, List, Optional

from client.alerts import AlertPresenter
from client.schedule_client import ScheduleService
from utils.logger import setup_logger

logger = setup_logger(__name__)


@dataclass
class NewTaskForm:
    """Fields of the add-task modal."""
    title: str = ""
    category: str = "personal"
    start_time: str = "09:00"
    end_time: str = "10:00"


class ScheduleScreen:
    """State container for the schedule tab, scoped to the screen's lifetime."""

    def __init__(
        self,
        schedule_service: ScheduleService,
        alerts: AlertPresenter,
        user_id: Optional[str] = None,
        selected_date: Optional[date] = None,
    ):
        self.schedule_service = schedule_service
        self.alerts = alerts
        self.user_id = user_id

        self.selected_date: date = selected_date or date.today()
        self.blocks: List[Dict[str, Any]] = []
        self.schedule_id: str = ""
        self.loading = True
        self.refreshing = False
        self.show_add_modal = False
        self.new_task = NewTaskForm()

    # Loading

    async def fetch_schedule(self) -> None:
        if not self.user_id:
            return

        try:
            date_str = self.schedule_service.format_date_for_api(self.selected_date)
            data = await self.schedule_service.get_schedule(date_str)
            self.blocks = data.get("blocks") or []
            self.schedule_id = data.get("_id") or ""
        except Exception as e:
            logger.error(f"Error fetching schedule: {e}", exc_info=True)
            self.alerts.alert("Error", "Failed to load schedule")
        finally:
            self.loading = False
            self.refreshing = False

    async def on_refresh(self) -> None:
        self.refreshing = True
        await self.fetch_schedule()

    # Tasks

    def _find_block(self, block_id: str) -> Optional[Dict[str, Any]]:
        return next((block for block in self.blocks if block.get("id") == block_id), None)

    async def toggle_task_completion(self, block_id: str) -> None:
        if not self.schedule_id:
            return

        block = self._find_block(block_id)
        if block is None:
            return

        try:
            updated = await self.schedule_service.update_schedule_block(
                self.schedule_id,
                block_id,
                {"completed": not block.get("completed", False)},
            )
            self.blocks = updated["blocks"]
        except Exception as e:
            logger.error(f"Error updating task {block_id}: {e}", exc_info=True)
            self.alerts.alert("Error", "Failed to update task")

    async def add_task(self) -> None:
        """Append the form's task and send the whole list; blank titles never leave the client."""
        if not self.new_task.title.strip():
            self.alerts.alert("Error", "Please enter a task title")
            return

        new_block = {
            "id": self.schedule_service.generate_block_id(),
            "title": self.new_task.title,
            "category": self.new_task.category,
            "startTime": self.new_task.start_time,
            "endTime": self.new_task.end_time,
            "completed": False,
        }

        try:
            updated = await self.schedule_service.update_schedule(
                self.schedule_service.format_date_for_api(self.selected_date),
                [*self.blocks, new_block],
            )
            self.blocks = updated["blocks"]
            self.schedule_id = updated["_id"]
            self.show_add_modal = False
            self.new_task = NewTaskForm()
        except Exception as e:
            logger.error(f"Error adding task: {e}", exc_info=True)
            self.alerts.alert("Error", "Failed to add task")

    async def delete_task(self, block_id: str) -> None:
        confirmed = await self.alerts.confirm(
            "Delete Task",
            "Are you sure you want to delete this task?",
            confirm_label="Delete",
            destructive=True,
        )
        if not confirmed or not self.schedule_id:
            return

        try:
            updated = await self.schedule_service.delete_schedule_block(self.schedule_id, block_id)
            self.blocks = updated["blocks"]
        except Exception as e:
            logger.error(f"Error deleting task {block_id}: {e}", exc_info=True)
            self.alerts.alert("Error", "Failed to delete task")

    # Dates

    async def navigate_date(self, direction: str) -> None:
        """Move one day back ("prev") or forward ("next") and reload."""
        if direction not in ("prev", "next"):
            raise ValueError(f"direction must be 'prev' or 'next', got {direction!r}")
        step = 1 if direction == "next" else -1
        await self.select_date(self.selected_date + timedelta(days=step))

    async def select_date(self, new_date: date) -> None:
        self.selected_date = new_date
        await self.fetch_schedule()

    def formatted_date(self) -> str:
        """e.g. 'Monday, March 4, 2024'."""
        d = self.selected_date
        return f"{d:%A}, {d:%B} {d.day}, {d.year}"

    # Add-task modal

    def open_add_modal(self) -> None:
        self.show_add_modal = True

    def close_add_modal(self) -> None:
        self.show_add_modal = False

    def set_new_task(self, **fields: str) -> None:
        """Update some form fields, e.g. set_new_task(title="Run")."""
        current = asdict(self.new_task)
        unknown = set(fields) - set(current)
        if unknown:
            raise TypeError(f"Unknown task fields: {sorted(unknown)}")
        current.update(fields)
        self.new_task = NewTaskForm(**current)

    # Derived views

    def time_slots(self) -> List[Dict[str, Any]]:
        return [
            {
                "id": block["id"],
                "time": block["startTime"],
                "title": block["title"],
                "category": block["category"],
                "completed": block.get("completed", False),
            }
            for block in self.blocks
        ]

    def stats(self) -> Dict[str, int]:
        slots = self.time_slots()
        return {
            "total": len(slots),
            "completed": sum(1 for slot in slots if slot["completed"]),
        }
