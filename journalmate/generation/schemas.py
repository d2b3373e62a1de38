"""
Schemas for the plan-generation hand-off.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from journalmate.domains.schemas import Domain


class GenerationRequest(BaseModel):
    """Everything the plan generator needs for one ready session."""

    session_id: Optional[str] = Field(default=None, description="Originating session")
    domain: Domain = Field(description="Planning domain")
    mode: str = Field(description="quick or smart")
    collected_fields: Dict[str, Any] = Field(
        alias="collectedFields",
        description="Field name -> value, in the order the user supplied them",
    )
    context: Dict[str, Any] = Field(
        default_factory=dict, description="Upstream context (e.g., destination)"
    )

    class Config:
        populate_by_name = True


class DomainDetection(BaseModel):
    """Result of classifying a free-text goal into a domain."""

    domain: Domain
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    fallback: bool = Field(
        default=False, description="True when the default domain was used"
    )
