"""Output contracts for the plan-generation hand-off."""

from journalmate.shared.contracts.plan_output import (
    ActivityCategory,
    PlanActivity,
    PlanTask,
    PlanOutputV1,
    validate_plan_output,
)

__all__ = [
    "ActivityCategory",
    "PlanActivity",
    "PlanTask",
    "PlanOutputV1",
    "validate_plan_output",
]
