"""
Plan output contract.

Defines the Activity/Task structure the external plan-generation model
must produce. A response is validated against this contract before it
is trusted; anything failing validation is treated exactly like a
transport failure and never surfaced to the user.
"""

import json
from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, Field, ValidationError, field_validator, model_validator

from journalmate.shared.errors import PlanValidationError
from journalmate.shared.llm.parsing import load_json_response


TaskPriority = Literal["high", "medium", "low"]


class ActivityCategory(str, Enum):
    """Top-level category of a generated activity."""

    WORK = "work"
    PERSONAL = "personal"
    HEALTH = "health"
    LEARNING = "learning"
    FINANCE = "finance"
    SOCIAL = "social"
    TRAVEL = "travel"
    OTHER = "other"


class PlanActivity(BaseModel):
    """The activity a plan is organised under."""

    title: str = Field(min_length=1, description="Clear, specific activity title")
    category: ActivityCategory = Field(description="Activity category")
    summary: str = Field(
        min_length=1,
        validation_alias=AliasChoices("summary", "description"),
        description="Brief description of the overall plan",
    )

    class Config:
        str_strip_whitespace = True

    @field_validator("category", mode="before")
    @classmethod
    def _normalize_category(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class PlanTask(BaseModel):
    """A single actionable task within a plan."""

    title: str = Field(min_length=1, description="Specific, actionable task title")
    description: Optional[str] = Field(default=None, description="Task details")
    category: str = Field(min_length=1, description="Same as activity or more specific")
    priority: TaskPriority = Field(description="Task priority: high, medium or low")
    time_estimate: str = Field(
        min_length=1,
        alias="timeEstimate",
        description="Human-readable effort estimate (e.g., '30 min', '2 hours')",
    )
    order: int = Field(ge=1, description="1-based position within the task list")
    context: Optional[Union[str, Dict[str, Any]]] = Field(
        default=None, description="Optional supporting context for the task"
    )

    class Config:
        populate_by_name = True
        str_strip_whitespace = True


class PlanOutputV1(BaseModel):
    """
    Contract for plan-generation output (v1).

    Task ``order`` values must form the contiguous sequence 1..N matching
    list position.
    """

    activity: PlanActivity
    tasks: List[PlanTask] = Field(min_length=1)

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "activity": {
                    "title": "Spain Trip: Barcelona & Madrid",
                    "category": "travel",
                    "summary": "Two weeks across Barcelona and Madrid in November",
                },
                "tasks": [
                    {
                        "title": "Book roundtrip flights ($400-600, check Google Flights)",
                        "category": "travel",
                        "priority": "high",
                        "timeEstimate": "1 hour",
                        "order": 1,
                    },
                    {
                        "title": "Reserve Sagrada Familia tickets for Nov 12",
                        "description": "Timed entry sells out; book the 10am slot",
                        "category": "travel",
                        "priority": "medium",
                        "timeEstimate": "20 min",
                        "order": 2,
                    },
                ],
            }
        }

    @model_validator(mode="after")
    def _check_contiguous_order(self) -> "PlanOutputV1":
        orders = [task.order for task in self.tasks]
        expected = list(range(1, len(self.tasks) + 1))
        if orders != expected:
            raise ValueError(
                f"task order must be the contiguous sequence {expected}, got {orders}"
            )
        return self


def validate_plan_output(payload: Union[str, Dict[str, Any], PlanOutputV1]) -> PlanOutputV1:
    """
    Validate a raw generation response against the plan contract.

    Args:
        payload: Raw LLM text (JSON, optionally fenced), a decoded dict,
            or an already-built PlanOutputV1

    Returns:
        The validated PlanOutputV1

    Raises:
        PlanValidationError: If the payload is not valid JSON or violates the contract
    """
    if isinstance(payload, PlanOutputV1):
        payload = payload.model_dump(by_alias=True)

    if isinstance(payload, str):
        try:
            payload = load_json_response(payload)
        except json.JSONDecodeError as e:
            raise PlanValidationError(f"Plan response is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise PlanValidationError(
            f"Plan response must be a JSON object, got {type(payload).__name__}"
        )

    try:
        return PlanOutputV1.model_validate(payload)
    except ValidationError as e:
        raise PlanValidationError(f"Plan response violates the output contract: {e}") from e
