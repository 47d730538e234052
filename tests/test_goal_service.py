"""
Unit tests for goal progress rules and persistence hooks.
"""

from __future__ import annotations

import math

import pytest

from schemas.goal import Goal, ProgressUpdate
from services.goal_service import (
    apply_progress_update,
    clamp_progress,
    get_progress_calculator,
    prepare_for_save,
    register_progress_calculator,
    target_ratio_progress,
)


def make_goal(**overrides) -> Goal:
    fields = {"user_id": "user-1", "title": "Goal", "type": "numeric"}
    fields.update(overrides)
    return Goal(**fields)


class TestClamp:
    @pytest.mark.parametrize(
        "value, expected",
        [(-5, 0), (0, 0), (55.5, 55.5), (100, 100), (1e6, 100), (math.inf, 100), (-math.inf, 0), (math.nan, 0)],
    )
    def test_clamp(self, value, expected) -> None:
        assert clamp_progress(value) == expected


class TestProgressUpdateParsing:
    def test_huge_integers_saturate_to_finite_floats(self) -> None:
        update = ProgressUpdate.model_validate({"currentValue": 10**400, "progress": -(10**400)})

        assert math.isfinite(update.current_value) and update.current_value > 0
        assert math.isfinite(update.progress) and update.progress < 0


class TestApplyProgressUpdate:
    def test_habit_takes_current_value(self) -> None:
        goal = apply_progress_update(make_goal(type="habit"), ProgressUpdate(currentValue=4))
        assert goal.current_value == 4

    def test_milestone_takes_clamped_progress(self) -> None:
        goal = apply_progress_update(make_goal(type="milestone"), ProgressUpdate(progress=150))
        assert goal.progress == 100

    def test_empty_update_changes_nothing(self) -> None:
        goal = apply_progress_update(make_goal(current_value=3, progress=7), ProgressUpdate())
        assert (goal.current_value, goal.progress) == (3, 7)

    def test_non_finite_numbers_dropped(self) -> None:
        update = ProgressUpdate.model_validate({"currentValue": float("nan"), "progress": float("inf")})
        assert update.current_value is None
        assert update.progress is None


class TestPrepareForSave:
    def test_default_formula_preserves_progress(self) -> None:
        goal = prepare_for_save(make_goal(current_value=90, target_value=100, progress=12))
        assert goal.progress == 12

    def test_stamps_timestamps(self) -> None:
        goal = prepare_for_save(make_goal())
        assert goal.created_at is not None
        assert goal.updated_at >= goal.created_at

    def test_custom_calculator_is_used_and_clamped(self) -> None:
        register_progress_calculator("always_150", lambda goal: 150)

        goal = prepare_for_save(make_goal(), get_progress_calculator("always_150"))

        assert goal.progress == 100

    def test_milestone_skips_calculator(self) -> None:
        goal = prepare_for_save(make_goal(type="milestone", progress=40), lambda g: 0)
        assert goal.progress == 40

    def test_target_ratio_without_target_keeps_progress(self) -> None:
        assert target_ratio_progress(make_goal(current_value=5, progress=33)) == 33

    def test_unknown_formula(self) -> None:
        with pytest.raises(ValueError):
            get_progress_calculator("does-not-exist")
