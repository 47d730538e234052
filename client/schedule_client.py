"""Schedule API calls used by the schedule screen."""

from datetime import date
from typing import Any, Dict, List

from client.api_client import ApiClient
from utils.helpers import format_date_for_api, generate_block_id


class ScheduleService:
    """Client for the /schedules endpoints."""

    def __init__(self, api: ApiClient):
        self.api = api

    async def get_schedule(self, date_str: str) -> Dict[str, Any]:
        """Schedule for a date; has no "_id" when nothing is saved yet."""
        return await self.api.request("GET", "/schedules", params={"date": date_str})

    async def update_schedule(self, date_str: str, blocks: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Replace the whole block list for a date."""
        return await self.api.request("PUT", "/schedules", json={"date": date_str, "blocks": blocks})

    async def update_schedule_block(
        self,
        schedule_id: str,
        block_id: str,
        updates: Dict[str, Any],
    ) -> Dict[str, Any]:
        return await self.api.request(
            "PATCH", f"/schedules/{schedule_id}/blocks/{block_id}", json=updates
        )

    async def delete_schedule_block(self, schedule_id: str, block_id: str) -> Dict[str, Any]:
        return await self.api.request("DELETE", f"/schedules/{schedule_id}/blocks/{block_id}")

    @staticmethod
    def generate_block_id() -> str:
        return generate_block_id()

    @staticmethod
    def format_date_for_api(value: date) -> str:
        return format_date_for_api(value)
