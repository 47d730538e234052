"""Goal API calls."""

from typing import Any, Dict, List, Optional

from client.api_client import ApiClient


class GoalService:
    """Client for the /goals endpoints."""

    def __init__(self, api: ApiClient):
        self.api = api

    async def list_goals(self, goal_type: Optional[str] = None) -> List[Dict[str, Any]]:
        params = {"type": goal_type} if goal_type else None
        data = await self.api.request("GET", "/goals", params=params)
        return data["goals"]

    async def create_goal(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        data = await self.api.request("POST", "/goals", json=payload)
        return data["goal"]

    async def update_progress(
        self,
        goal_id: str,
        current_value: Optional[float] = None,
        progress: Optional[float] = None,
    ) -> Dict[str, Any]:
        """Send whichever of currentValue/progress was given; returns the updated goal."""
        body = {}
        if current_value is not None:
            body["currentValue"] = current_value
        if progress is not None:
            body["progress"] = progress
        data = await self.api.request("PUT", f"/goals/{goal_id}/progress", json=body)
        return data["goal"]

    async def delete_goal(self, goal_id: str) -> None:
        await self.api.request("DELETE", f"/goals/{goal_id}")
