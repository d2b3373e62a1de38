"""
Plan-generation hand-off.

Builds generation requests from ready sessions, calls the external
model, and classifies free-text goals into planning domains.
"""

from journalmate.generation.detection import DomainDetector
from journalmate.generation.generator import OpenAIPlanGenerator, PlanGenerator
from journalmate.generation.schemas import DomainDetection, GenerationRequest

__all__ = [
    "DomainDetector",
    "DomainDetection",
    "GenerationRequest",
    "OpenAIPlanGenerator",
    "PlanGenerator",
]
